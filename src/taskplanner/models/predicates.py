"""Predicates used to filter task lists.

Each predicate is an immutable callable ``Task -> bool`` that compares by
value, so a filtered view can tell whether its filter changed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskplanner.models.dates import Date
from taskplanner.models.deadline import DAYS_IN_WEEK
from taskplanner.models.task import Task


def _to_date(value: object) -> object:
    if isinstance(value, Date):
        return value.get_date()
    return value


class TaskOnDatePredicate(BaseModel):
    """Matches tasks whose deadline is exactly ``day``."""

    model_config = ConfigDict(frozen=True)

    day: date

    @field_validator("day", mode="before")
    @classmethod
    def coerce_day(cls, value: object) -> object:
        return _to_date(value)

    def __call__(self, task: Task) -> bool:
        return task.deadline.is_on(self.day)


class TaskWithinWeekPredicate(BaseModel):
    """Matches tasks due from ``reference`` up to the end of the following week.

    Tasks without a deadline or with a deadline before ``reference`` never
    match.
    """

    model_config = ConfigDict(frozen=True)

    reference: date
    days: int = Field(default=DAYS_IN_WEEK, ge=1)

    @field_validator("reference", mode="before")
    @classmethod
    def coerce_reference(cls, value: object) -> object:
        return _to_date(value)

    def __call__(self, task: Task) -> bool:
        if task.is_deadline_empty():
            return False
        deadline = task.deadline
        return deadline.get_date() >= self.reference and deadline.is_within_days(
            self.reference, self.days
        )


class TitleContainsKeywordsPredicate(BaseModel):
    """Matches tasks whose title contains any keyword as a whole word, ignoring case."""

    model_config = ConfigDict(frozen=True)

    keywords: tuple[str, ...]

    def __call__(self, task: Task) -> bool:
        words = {word.lower() for word in str(task.title).split()}
        return any(keyword.lower() in words for keyword in self.keywords)


def filter_tasks(tasks: Iterable[Task], predicate: Callable[[Task], bool]) -> list[Task]:
    """Return the tasks matching *predicate*, in their original order."""
    return [task for task in tasks if predicate(task)]
