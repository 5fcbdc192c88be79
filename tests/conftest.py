"""Shared fixtures for query template resolution tests."""

from datetime import UTC, datetime, timedelta

import pytest

from core import QueryOptions, TimeRange
from loganalytics.config import reset_settings
from template_resolver import QueryTemplateResolver

# Fixed instants so expected literals can be written out in full
RANGE_END = datetime(2024, 3, 2, 9, 30, 0, 250000, tzinfo=UTC)
RANGE_START = RANGE_END - timedelta(hours=24)

START_LITERAL = "datetime(2024-03-01T09:30:00.250Z)"
END_LITERAL = "datetime(2024-03-02T09:30:00.250Z)"


@pytest.fixture
def live_range() -> TimeRange:
    """Last 24 hours, still advancing."""
    return TimeRange(start=RANGE_START, end=RANGE_END, raw_from="now-24h", raw_to="now")


@pytest.fixture
def fixed_range() -> TimeRange:
    """From 24h ago until 1h ago."""
    return TimeRange(
        start=RANGE_START,
        end=RANGE_END - timedelta(hours=1),
        raw_from="now-24h",
        raw_to="now-1h",
    )


@pytest.fixture
def options(live_range) -> QueryOptions:
    return QueryOptions(time_range=live_range, interval="5m")


@pytest.fixture
def resolver() -> QueryTemplateResolver:
    return QueryTemplateResolver(default_time_column="TimeGenerated")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; reload them around every test."""
    reset_settings()
    yield
    reset_settings()
