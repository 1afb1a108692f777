"""Shared helpers for resolving test fixture paths."""

from __future__ import annotations

from pathlib import Path

_TAKEN_SLUGS_FIXTURE_NAME = "taken_slugs.txt"


def taken_slugs_fixture_path() -> Path:
    """Return the taken-slugs fixture path used by CLI tests."""

    return Path(__file__).parent / "files" / _TAKEN_SLUGS_FIXTURE_NAME
