"""Shared pytest fixtures for weighted-picker tests.

Provides isolated configuration objects and random sources used across
multiple test modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from weighted_picker.config import PickerConfig
from weighted_picker.parsing.types import Entry
from weighted_picker.random.seeded import SeededRandomSource


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep PICKER_* variables and any local .env file out of every test."""
    for var in ("PICKER_RANDOM_SOURCE_TYPE", "PICKER_SEED", "PICKER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def default_config() -> PickerConfig:
    """Return a PickerConfig with all default values."""
    return PickerConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def seeded_source() -> SeededRandomSource:
    """Return a SeededRandomSource with a fixed seed for reproducibility."""
    return SeededRandomSource(seed=42)


@pytest.fixture
def one_to_three() -> list[Entry]:
    """Two entries with weights 1 and 3 (B should win 75% of draws)."""
    return [Entry("A", 1.0), Entry("B", 3.0)]
