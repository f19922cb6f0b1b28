"""
Shared pytest fixtures and configuration for date-spine tests.

This module provides:
- A toolkit bound to a fixed clock (deterministic "now")
- Settings built without reading the environment
- Auto-marking of tests by location
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure datespine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from datespine.core.settings import DateSpineSettings
from datespine.toolkit import DateToolkit

# Tuesday
FIXED_NOW = datetime(2017, 5, 30, 14, 0, 23, 439000)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.path).relative_to(Path(__file__).parent)

        if "toolkit" in str(test_path):
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep DATESPINE_* variables from the host out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("DATESPINE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def settings() -> DateSpineSettings:
    return DateSpineSettings(_env_file=None)


@pytest.fixture
def toolkit(settings) -> DateToolkit:
    """DateToolkit whose clock always reads FIXED_NOW."""
    return DateToolkit(settings=settings, clock=lambda: FIXED_NOW)
