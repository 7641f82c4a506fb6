"""Recurrence rule of a task.

Task only relies on ``is_expired()`` and ``is_empty_value()``. Subclass
RecurringSchedule to plug in a different recurrence grammar.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from taskplanner.exceptions import InvalidFieldError, PreconditionError
from taskplanner.models.clock import Clock, get_default_clock
from taskplanner.models.dates import format_date, is_parsable_date, parse_date
from taskplanner.utils.recurrence import (
    VALID_PATTERNS,
    iter_occurrences,
    resolve_rrule,
    with_until,
)
from taskplanner.utils.validation import require_non_null

logger = logging.getLogger(__name__)


class RecurringSchedule(BaseModel):
    """How a task repeats and the last day it repeats on.

    Raw form is ``dd/mm/yyyy;<pattern>``, e.g. ``30/06/2021;weekly``, with the
    pattern one of ``VALID_PATTERNS``. The empty string means the task does
    not recur.
    """

    model_config = ConfigDict(frozen=True)

    FIELD_NAME: ClassVar[str] = "Recurring Schedule"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Recurring schedule should be in the format dd/mm/yyyy;pattern with an end date "
        f"after today and a pattern out of: {', '.join(VALID_PATTERNS)} "
        "eg. 30/06/2021;weekly"
    )
    SEPARATOR: ClassVar[str] = ";"
    RAW_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"(?P<end>[^;\s]+)\s*;\s*(?P<pattern>[A-Za-z-]+)"
    )

    end_date: date | None = None
    pattern: str | None = None
    _clock: Clock = PrivateAttr(default_factory=get_default_clock)

    def __init__(self, schedule: str, /, clock: Clock | None = None) -> None:
        require_non_null(schedule, self.FIELD_NAME)
        clock = clock or get_default_clock()
        if not RecurringSchedule.is_valid_schedule(schedule, clock):
            raise InvalidFieldError(self.FIELD_NAME, self.MESSAGE_CONSTRAINTS)
        end_date, pattern = RecurringSchedule.parse_schedule(schedule)
        super().__init__(end_date=end_date, pattern=pattern)
        self._clock = clock

    @staticmethod
    def is_valid_schedule(test: str, clock: Clock | None = None) -> bool:
        """Return True if *test* is empty or a well-formed schedule ending after today."""
        logger.debug("Checking for valid recurring schedule %r", test)
        if test == "":
            return True
        m = RecurringSchedule.RAW_PATTERN.fullmatch(test.strip())
        if m is None or resolve_rrule(m.group("pattern")) is None:
            return False
        if not is_parsable_date(m.group("end")):
            return False
        today = (clock or get_default_clock()).today()
        return parse_date(m.group("end")) > today

    @staticmethod
    def parse_schedule(schedule: str) -> tuple[date | None, str | None]:
        if schedule == "":
            return None, None
        m = RecurringSchedule.RAW_PATTERN.fullmatch(schedule.strip())
        if m is None:
            raise ValueError(f"'{schedule}' is not a recurring schedule")
        return parse_date(m.group("end")), m.group("pattern").lower()

    def is_empty_value(self) -> bool:
        return self.end_date is None

    def is_expired(self) -> bool:
        """Return True if today is strictly after the last recurrence date.

        Raises:
            PreconditionError: If the task does not recur
        """
        return self._clock.today() > self._require_end_date("is_expired")

    @property
    def rrule(self) -> str | None:
        """iCalendar RRULE including ``UNTIL``, or None when empty."""
        if self.is_empty_value():
            return None
        return with_until(resolve_rrule(self.pattern), self.end_date)

    def occurrences(self, start: date) -> list[date]:
        """Return the recurrence dates from *start* up to the end date.

        Raises:
            PreconditionError: If the task does not recur
        """
        end_date = self._require_end_date("occurrences")
        return list(iter_occurrences(self.pattern, start, end_date))

    def _require_end_date(self, operation: str) -> date:
        if self.end_date is None:
            raise PreconditionError(
                f"Cannot evaluate {operation}() on an empty recurring schedule"
            )
        return self.end_date

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, RecurringSchedule):
            return NotImplemented
        return (self.end_date, self.pattern) == (other.end_date, other.pattern)

    def __hash__(self) -> int:
        return hash((self.end_date, self.pattern))

    def __str__(self) -> str:
        if self.is_empty_value():
            return ""
        return f"{format_date(self.end_date)}{self.SEPARATOR}{self.pattern}"
