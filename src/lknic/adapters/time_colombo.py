"""
Asia/Colombo Time Adapter.

Implements the TimePort interface for the Sri Lankan calendar.
All "current date" questions (age, latest valid birth year) are answered
in Asia/Colombo (UTC+05:30), whatever the process timezone is.

Key behaviors:
- now_local: Returns current Asia/Colombo time
- today: Returns the current Asia/Colombo calendar date
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

COLOMBO_TZ = "Asia/Colombo"


class ColomboTimeAdapter:
    """
    Time adapter for the Asia/Colombo timezone.

    Sri Lanka observes no DST, so local dates roll over at 18:30 UTC.
    """

    def __init__(self, tz_name: str = COLOMBO_TZ) -> None:
        """
        Initialize with specified timezone.

        Args:
            tz_name: IANA timezone name (default: Asia/Colombo)
        """
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)

    def now_local(self) -> datetime:
        """Get current time in Asia/Colombo."""
        return datetime.now(self._tz)

    def today(self) -> date:
        """Get the current calendar date in Asia/Colombo."""
        return self.now_local().date()

    @property
    def timezone_name(self) -> str:
        """Get the timezone name."""
        return self._tz_name


class FrozenTimeAdapter:
    """
    Time adapter that returns a fixed time.

    Useful for deterministic testing of age and minimum-age checks.
    """

    def __init__(
        self,
        frozen_utc: datetime,
        tz_name: str = COLOMBO_TZ,
    ) -> None:
        """
        Initialize with frozen time.

        Args:
            frozen_utc: The frozen instant. Naive values are treated as UTC,
                aware values are converted.
            tz_name: IANA timezone name for now_local() and today()
        """
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)

    @classmethod
    def on_local_date(cls, day: date, tz_name: str = COLOMBO_TZ) -> FrozenTimeAdapter:
        """Freeze at local noon of the given calendar date."""
        local_noon = datetime(day.year, day.month, day.day, 12, 0, tzinfo=ZoneInfo(tz_name))
        return cls(local_noon, tz_name=tz_name)

    def now_local(self) -> datetime:
        """Get frozen time in local timezone."""
        return self._frozen_utc.astimezone(self._tz)

    def today(self) -> date:
        """Get the frozen local calendar date."""
        return self.now_local().date()

    @property
    def timezone_name(self) -> str:
        """Get the timezone name."""
        return self._tz_name

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen_utc = self._frozen_utc + delta


def create_time_adapter(tz_name: str = COLOMBO_TZ) -> ColomboTimeAdapter:
    """Factory function to create a time adapter."""
    return ColomboTimeAdapter(tz_name)
