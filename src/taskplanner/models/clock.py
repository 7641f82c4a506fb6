"""Clock abstraction used by the date-dependent fields.

Deadline and RecurringSchedule never call ``date.today()`` directly; they ask
a Clock so callers and tests can decide what "today" is.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo


class Clock(ABC):
    """Source of the current calendar date."""

    @abstractmethod
    def today(self) -> date: ...


class SystemClock(Clock):
    """Wall-clock date, optionally in a named timezone.

    Args:
        timezone: IANA timezone name (e.g. "Asia/Singapore"). ``None`` uses
            the local date of the host.
    """

    def __init__(self, timezone: str | None = None) -> None:
        self._tz = ZoneInfo(timezone) if timezone else None

    def today(self) -> date:
        if self._tz is None:
            return date.today()
        return datetime.now(self._tz).date()

    def __repr__(self) -> str:
        return f"SystemClock({self._tz.key if self._tz else None!r})"


class FixedClock(Clock):
    """Clock pinned to a given date until moved explicitly."""

    def __init__(self, today: date) -> None:
        self._today = today

    def today(self) -> date:
        return self._today

    def set(self, today: date) -> None:
        self._today = today

    def advance(self, days: int = 1) -> None:
        self._today += timedelta(days=days)

    def __repr__(self) -> str:
        return f"FixedClock({self._today.isoformat()})"


_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    """Return the clock used when a field is built without one."""
    return _default_clock


def set_default_clock(clock: Clock) -> None:
    """Replace the clock used when a field is built without one."""
    global _default_clock
    _default_clock = clock
