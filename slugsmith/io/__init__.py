"""Persistence helpers for the reference record integration."""

from .registry import RecordRegistry, UniqueValidator

__all__ = ["RecordRegistry", "UniqueValidator"]
