"""Pytest configuration shared by all suites.

Settings are cached with lru_cache; every test gets a fresh cache and an
environment that does not depend on the host's YEAR_CUTOFF_* variables.
"""

from __future__ import annotations

from typing import Generator

import pytest

from year_cutoff.config import get_settings
from year_cutoff.interpreter import YearInterpreter


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.delenv("YEAR_CUTOFF_CUTOFF_YEAR", raising=False)
    monkeypatch.delenv("YEAR_CUTOFF_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def interpreter() -> YearInterpreter:
    """Interpreter with cutoff year 2020 and the default strategy."""
    return YearInterpreter(cutoff_year=2020)
