# tests/conftest.py
from pathlib import Path

import pytest

from hangul_rules.services.examples_repository import ExamplesRepository
from hangul_rules.services.settings_store import SettingsStore


@pytest.fixture(scope="module")
def examples() -> ExamplesRepository:
    return ExamplesRepository()


@pytest.fixture
def store(tmp_path: Path) -> SettingsStore:
    """A settings store that never touches the real settings.yaml."""
    return SettingsStore(tmp_path / "settings.yaml")
