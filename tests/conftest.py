"""Pytest configuration and fixtures for Datewise tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pendulum
import pytest

# Add the parent directory to sys.path so datewise can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datewise.config import get_settings  # noqa: E402
from datewise.now import FixedClock  # noqa: E402


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test with the default locale and hour cycle."""
    monkeypatch.delenv("DATEWISE_LOCALE", raising=False)
    monkeypatch.delenv("DATEWISE_HOUR_CYCLE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def may_clock() -> FixedClock:
    """Clock stopped at 2022-05-05T10:12:13Z."""
    return FixedClock(pendulum.datetime(2022, 5, 5, 10, 12, 13, tz="UTC"))


@pytest.fixture
def evening_clock() -> FixedClock:
    """Clock stopped at 8pm UTC on 2022-07-09."""
    return FixedClock(pendulum.datetime(2022, 7, 9, 20, 0, tz="UTC"))


@pytest.fixture
def early_clock() -> FixedClock:
    """Clock stopped at 2am UTC on 2022-07-09."""
    return FixedClock(pendulum.datetime(2022, 7, 9, 2, 0, tz="UTC"))


@pytest.fixture
def summer_clock() -> FixedClock:
    """Clock stopped at noon UTC on 2024-06-12, inside British Summer Time."""
    return FixedClock(pendulum.datetime(2024, 6, 12, 12, 0, tz="UTC"))


@pytest.fixture
def winter_clock() -> FixedClock:
    """Clock stopped at noon UTC on 2024-01-15."""
    return FixedClock(pendulum.datetime(2024, 1, 15, 12, 0, tz="UTC"))
