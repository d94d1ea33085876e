# tests/conftest.py

"""Shared pytest fixtures for all catalog tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from catalog.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_db_path(tmp_path: Path) -> Generator[Path, None, None]:
    """Point the default store at a per-test file so runs never share data."""
    original = Settings.DB_PATH
    Settings.DB_PATH = tmp_path / "catalog.db"
    try:
        yield Settings.DB_PATH
    finally:
        Settings.DB_PATH = original
