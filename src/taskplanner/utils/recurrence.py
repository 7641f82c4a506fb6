"""Named recurrence patterns and the dates they produce."""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from datetime import date, timedelta

# Maps pattern names to iCalendar RRULE strings.
RECURRENCE_PATTERNS: dict[str, str] = {
    "daily": "FREQ=DAILY",
    "weekdays": "FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR",
    "weekly": "FREQ=WEEKLY",
    "bi-weekly": "FREQ=WEEKLY;INTERVAL=2",
    "monthly": "FREQ=MONTHLY",
}

VALID_PATTERNS = list(RECURRENCE_PATTERNS.keys())


def resolve_rrule(pattern: str) -> str | None:
    """Convert a pattern name to an RRULE string.

    Args:
        pattern: Pattern name (e.g., "daily", "weekly"), case-insensitive

    Returns:
        RRULE string, or None if pattern is not recognized
    """
    return RECURRENCE_PATTERNS.get(pattern.lower())


def describe_rrule(rrule: str) -> str:
    """Convert an RRULE string back to its pattern name.

    An ``UNTIL`` part is ignored. Unknown rules are returned unchanged.
    """
    base = ";".join(part for part in rrule.split(";") if not part.startswith("UNTIL="))
    reverse = {v: k for k, v in RECURRENCE_PATTERNS.items()}
    return reverse.get(base, rrule)


def with_until(rrule: str, until: date) -> str:
    return f"{rrule};UNTIL={until:%Y%m%d}"


def iter_occurrences(pattern: str, start: date, until: date) -> Iterator[date]:
    """Yield the dates *pattern* produces from *start* up to *until* inclusive.

    ``monthly`` keeps the day of month of *start*, falling back to the last
    day of shorter months.

    Raises:
        ValueError: If *pattern* is not one of VALID_PATTERNS
    """
    name = pattern.lower()
    if name not in RECURRENCE_PATTERNS:
        raise ValueError(f"Unknown recurrence pattern '{pattern}'")

    if name == "monthly":
        yield from _iter_monthly(start, until)
        return

    step = {"daily": 1, "weekdays": 1, "weekly": 7, "bi-weekly": 14}[name]
    current = start
    while current <= until:
        if name != "weekdays" or current.weekday() < 5:
            yield current
        current += timedelta(days=step)


def _iter_monthly(start: date, until: date) -> Iterator[date]:
    year, month = start.year, start.month
    while True:
        last_day = calendar.monthrange(year, month)[1]
        current = date(year, month, min(start.day, last_day))
        if current > until:
            return
        yield current
        month += 1
        if month > 12:
            year, month = year + 1, 1
