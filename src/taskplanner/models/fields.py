"""Single-string field value objects of a Task.

Each field validates its raw input once, at construction, and is immutable
afterwards. Fields that allow an empty string use it to mean "not provided".
"""

from __future__ import annotations

import re
from datetime import datetime, time
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, EmailStr, TypeAdapter, ValidationError

from taskplanner.exceptions import InvalidFieldError
from taskplanner.utils.validation import require_non_null


class FieldValue(BaseModel):
    """Base class for validated string fields.

    Subclasses set ``FIELD_NAME``, ``MESSAGE_CONSTRAINTS`` and implement
    ``_matches``. ``ALLOWS_EMPTY`` controls whether ``""`` is accepted.
    """

    model_config = ConfigDict(frozen=True)

    FIELD_NAME: ClassVar[str] = ""
    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    ALLOWS_EMPTY: ClassVar[bool] = False

    value: str

    def __init__(self, value: str, /) -> None:
        cls = type(self)
        require_non_null(value, cls.FIELD_NAME)
        if not cls.is_valid(value):
            raise InvalidFieldError(cls.FIELD_NAME, cls.MESSAGE_CONSTRAINTS)
        super().__init__(value=cls._normalize(value))

    @classmethod
    def is_valid(cls, test: str) -> bool:
        """Return True if *test* is acceptable raw input for this field."""
        if test == "":
            return cls.ALLOWS_EMPTY
        return cls._matches(test)

    @classmethod
    def _matches(cls, test: str) -> bool:
        raise NotImplementedError

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value

    def is_empty_value(self) -> bool:
        return self.value == ""

    def __str__(self) -> str:
        return self.value


class Title(FieldValue):
    """Name of a task. Two tasks with the same title are the same task."""

    FIELD_NAME: ClassVar[str] = "Title"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Title should not be blank, should not start with whitespace "
        "and should be at most 100 characters on a single line"
    )
    MAX_LENGTH: ClassVar[int] = 100

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^\s][^\r\n]*")

    @classmethod
    def _matches(cls, test: str) -> bool:
        return len(test) <= cls.MAX_LENGTH and cls.PATTERN.fullmatch(test) is not None


class Description(FieldValue):
    FIELD_NAME: ClassVar[str] = "Description"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Description should be a single line of at most 500 characters"
    )
    ALLOWS_EMPTY: ClassVar[bool] = True
    MAX_LENGTH: ClassVar[int] = 500

    @classmethod
    def _matches(cls, test: str) -> bool:
        return len(test) <= cls.MAX_LENGTH and "\n" not in test and "\r" not in test


class Status(FieldValue):
    """Completion status, stored lower-cased."""

    FIELD_NAME: ClassVar[str] = "Status"
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Status should be either 'done' or 'not done'"
    ALLOWS_EMPTY: ClassVar[bool] = True

    DONE: ClassVar[str] = "done"
    NOT_DONE: ClassVar[str] = "not done"

    @classmethod
    def _matches(cls, test: str) -> bool:
        return test.lower() in (cls.DONE, cls.NOT_DONE)

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.lower()

    def is_done(self) -> bool:
        return self.value == self.DONE


_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)


class Email(FieldValue):
    FIELD_NAME: ClassVar[str] = "Email"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Email should be of the format local-part@domain eg. amy@gmail.com"
    )

    @classmethod
    def _matches(cls, test: str) -> bool:
        try:
            _email_adapter.validate_python(test)
        except ValidationError:
            return False
        return True


class Duration(FieldValue):
    """Time slot of a task within its day, written ``HH:MM-HH:MM``."""

    FIELD_NAME: ClassVar[str] = "Duration"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Duration should be in the format HH:MM-HH:MM (24-hour clock) "
        "with the start time before the end time eg. 12:30-13:30"
    )
    ALLOWS_EMPTY: ClassVar[bool] = True

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"(?P<start>([01][0-9]|2[0-3]):[0-5][0-9])-(?P<end>([01][0-9]|2[0-3]):[0-5][0-9])"
    )

    @classmethod
    def _matches(cls, test: str) -> bool:
        m = cls.PATTERN.fullmatch(test)
        if m is None:
            return False
        return _parse_time(m.group("start")) < _parse_time(m.group("end"))

    @property
    def start_time(self) -> time | None:
        if self.is_empty_value():
            return None
        return _parse_time(self.value.split("-")[0])

    @property
    def end_time(self) -> time | None:
        if self.is_empty_value():
            return None
        return _parse_time(self.value.split("-")[1])

    @property
    def minutes(self) -> int:
        """Length of the slot in minutes; 0 when no duration is set."""
        if self.is_empty_value():
            return 0
        start, end = self.start_time, self.end_time
        return (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)


class Tag(FieldValue):
    FIELD_NAME: ClassVar[str] = "Tag"
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tag names should be alphanumeric"

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")

    @classmethod
    def _matches(cls, test: str) -> bool:
        return cls.PATTERN.fullmatch(test) is not None

    @property
    def name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return f"[{self.value}]"


def _parse_time(text: str) -> time:
    return datetime.strptime(text, "%H:%M").time()
