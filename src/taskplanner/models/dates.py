"""Calendar date format shared by Deadline, RecurringSchedule and Date.

Dates are written ``dd/mm/yyyy`` with a two-digit day and month and a year in
the 1900s or 2000s.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from taskplanner.exceptions import InvalidFieldError
from taskplanner.utils.validation import require_non_null

DATE_FORMAT = "%d/%m/%Y"
DATE_PATTERN = re.compile(r"(0[1-9]|[12][0-9]|3[01])/(0[1-9]|1[012])/(19|20)[0-9]{2}")


def matches_date_pattern(text: str) -> bool:
    """Return True if *text* has the dd/mm/yyyy shape."""
    return DATE_PATTERN.fullmatch(text) is not None


def parse_date(text: str) -> date:
    """Parse a dd/mm/yyyy string.

    Raises:
        ValueError: If the text does not match the pattern or names a day
            that does not exist (e.g. 31/02/2030)
    """
    if not matches_date_pattern(text):
        raise ValueError(f"'{text}' is not in dd/mm/yyyy format")
    return datetime.strptime(text, DATE_FORMAT).date()


def is_parsable_date(text: str) -> bool:
    try:
        parse_date(text)
    except ValueError:
        return False
    return True


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


class Date(BaseModel):
    """A dd/mm/yyyy date with no restriction relative to today.

    Used by callers that look tasks up by day, e.g. a day view.
    """

    model_config = ConfigDict(frozen=True)

    FIELD_NAME: ClassVar[str] = "Date"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Date should be a valid date in the format dd/mm/yyyy eg. 12/08/2021"
    )

    value: date

    def __init__(self, raw: str, /) -> None:
        require_non_null(raw, self.FIELD_NAME)
        if not is_parsable_date(raw):
            raise InvalidFieldError(self.FIELD_NAME, self.MESSAGE_CONSTRAINTS)
        super().__init__(value=parse_date(raw))

    def get_date(self) -> date:
        return self.value

    def __str__(self) -> str:
        return format_date(self.value)
