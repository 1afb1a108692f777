"""Shared typed data models for slugsmith.

This package contains dataclasses used across modules to avoid cross-module
coupling and circular imports.
"""

from .datatypes import RecordEvent, SlugRecord, SlugResult

__all__ = ["RecordEvent", "SlugRecord", "SlugResult"]
