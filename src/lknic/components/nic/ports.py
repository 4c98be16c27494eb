"""
NIC component port definitions.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol


class TimePort(Protocol):
    """
    Calendar provider interface.

    The sole time-dependent input of the component. Ages and the
    latest valid birth year are computed from today().
    """

    def now_local(self) -> datetime:
        """Get current time in the reference timezone."""
        ...

    def today(self) -> date:
        """Get the current calendar date in the reference timezone."""
        ...

    @property
    def timezone_name(self) -> str:
        """Get the reference timezone name (e.g., 'Asia/Colombo')."""
        ...
