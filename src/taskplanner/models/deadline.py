"""Deadline of a task."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from taskplanner.exceptions import InvalidFieldError, PreconditionError
from taskplanner.models.clock import Clock, get_default_clock
from taskplanner.models.dates import format_date, is_parsable_date, parse_date
from taskplanner.utils.validation import require_non_null

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7


class Deadline(BaseModel):
    """A task's deadline: a date after today, or empty when no deadline is set.

    Validity depends on the clock. The same string can be a valid deadline
    today and an invalid one tomorrow, so ``is_valid_deadline`` is evaluated
    against the clock every time it is called.

    Args:
        deadline: ``dd/mm/yyyy`` string, or ``""`` for no deadline
        clock: Source of "today"; defaults to the module default clock. Kept
            for later ``over()`` checks.

    Raises:
        InvalidFieldError: If the string is malformed or not after today
    """

    model_config = ConfigDict(frozen=True)

    FIELD_NAME: ClassVar[str] = "Deadline"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Deadline should be in the format dd/mm/yyyy and should be "
        "a valid date after today eg. 12/08/2021"
    )
    MESSAGE_CONSTRAINTS_INVALID_DATE: ClassVar[str] = "Deadline should not be before today"

    value: date | None = None
    _clock: Clock = PrivateAttr(default_factory=get_default_clock)

    def __init__(self, deadline: str, /, clock: Clock | None = None) -> None:
        require_non_null(deadline, self.FIELD_NAME)
        clock = clock or get_default_clock()
        if not Deadline.is_valid_deadline(deadline, clock):
            message = (
                Deadline.MESSAGE_CONSTRAINTS_INVALID_DATE
                if is_parsable_date(deadline)
                else Deadline.MESSAGE_CONSTRAINTS
            )
            raise InvalidFieldError(Deadline.FIELD_NAME, message)
        super().__init__(value=Deadline.parse_deadline(deadline))
        self._clock = clock

    @staticmethod
    def is_valid_deadline(test: str, clock: Clock | None = None) -> bool:
        """Return True if *test* is empty or a well-formed date after today."""
        logger.debug("Checking for valid deadline %r", test)
        if test == "":
            return True
        if not is_parsable_date(test):
            return False
        today = (clock or get_default_clock()).today()
        return parse_date(test) > today

    @staticmethod
    def parse_deadline(deadline: str) -> date | None:
        """Parse a deadline string, returning None for the empty string."""
        logger.debug("Parsing deadline %r", deadline)
        if deadline == "":
            return None
        return parse_date(deadline)

    def get_date(self) -> date | None:
        return self.value

    def is_empty_value(self) -> bool:
        return self.value is None

    def over(self) -> bool:
        """Return True if today is strictly after the deadline.

        Raises:
            PreconditionError: If no deadline is set
        """
        stored = self._require_date("over")
        return self._clock.today() > stored

    def is_within_days(self, reference: date, days: int) -> bool:
        """Return True if the deadline falls before ``reference + days``.

        There is no lower bound: a deadline already before *reference* also
        counts. Callers wanting upcoming deadlines only must also check
        ``over()`` or compare against *reference* themselves.

        Raises:
            PreconditionError: If no deadline is set
        """
        stored = self._require_date("is_within_days")
        return stored < reference + timedelta(days=days)

    def is_within_seven_days(self, reference: date) -> bool:
        return self.is_within_days(reference, DAYS_IN_WEEK)

    def is_on(self, day: date) -> bool:
        return self.value is not None and self.value == day

    def _require_date(self, operation: str) -> date:
        if self.value is None:
            raise PreconditionError(f"Cannot evaluate {operation}() on an empty deadline")
        return self.value

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Deadline):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        if self.value is None:
            return ""
        return format_date(self.value)
