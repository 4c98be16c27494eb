from collections.abc import Iterator
from datetime import UTC, date, datetime

import pytest

from lknic.adapters.time_colombo import FrozenTimeAdapter
from lknic.components.nic import reset_config


@pytest.fixture(autouse=True)
def clean_config() -> Iterator[None]:
    """Reset the process-wide NIC config around every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def clock() -> FrozenTimeAdapter:
    """
    Frozen at 2026-02-28 11:30 Asia/Colombo.
    """
    return FrozenTimeAdapter(datetime(2026, 2, 28, 6, 0, tzinfo=UTC))


@pytest.fixture
def clock_on():
    """Factory for clocks frozen on a given Asia/Colombo calendar date."""

    def _make(year: int, month: int, day: int) -> FrozenTimeAdapter:
        return FrozenTimeAdapter.on_local_date(date(year, month, day))

    return _make
