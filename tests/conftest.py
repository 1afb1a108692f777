"""Shared pytest fixtures for the full slugsmith test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from fixture_paths import taken_slugs_fixture_path as resolve_taken_slugs_fixture_path
from slugsmith.config import ConfigLoader


@pytest.fixture(autouse=True)
def _isolate_slugsmith_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop `SLUGSMITH_*` variables so host settings never leak into tests."""

    for key in ConfigLoader.ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def taken_slugs_fixture_path() -> Path:
    """Provide the taken-slugs text fixture."""

    return resolve_taken_slugs_fixture_path()
