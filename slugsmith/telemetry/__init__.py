"""Telemetry and observability helpers.

This package emits deterministic run events for slug resolution auditing.
"""

from .logger import SlugLogger

__all__ = ["SlugLogger"]
