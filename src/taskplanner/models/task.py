"""Task aggregate."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict

from taskplanner.models.deadline import Deadline
from taskplanner.models.fields import Description, Duration, Status, Tag, Title
from taskplanner.models.recurring_schedule import RecurringSchedule
from taskplanner.utils.validation import require_all_non_null

logger = logging.getLogger(__name__)

TAGS_LABEL = f"{Tag.FIELD_NAME}s"


class Task(BaseModel):
    """A task in the planner.

    Every field is present and not None; missing data is an empty-valued
    field object instead. Tasks are immutable, so edits build a new Task.

    Attributes:
        title: Name of the task, also its identity for ``is_same_task``
        deadline: Date the task is due, possibly empty
        duration: Time slot within the day, possibly empty
        recurring_schedule: How the task repeats, possibly empty
        description: Free text, possibly empty
        status: Completion status, possibly empty
        tags: Unordered set of tags

    Raises:
        PreconditionError: If any argument is None
    """

    model_config = ConfigDict(frozen=True)

    title: Title
    deadline: Deadline
    duration: Duration
    recurring_schedule: RecurringSchedule
    description: Description
    status: Status
    tags: frozenset[Tag]

    def __init__(
        self,
        title: Title,
        deadline: Deadline,
        duration: Duration,
        recurring_schedule: RecurringSchedule,
        description: Description,
        status: Status,
        tags: Iterable[Tag],
    ) -> None:
        require_all_non_null(
            title=title,
            deadline=deadline,
            duration=duration,
            recurring_schedule=recurring_schedule,
            description=description,
            status=status,
            tags=tags,
        )
        super().__init__(
            title=title,
            deadline=deadline,
            duration=duration,
            recurring_schedule=recurring_schedule,
            description=description,
            status=status,
            tags=frozenset(tags),
        )

    def get_tags(self) -> frozenset[Tag]:
        return self.tags

    def set_tags(self, tags: Iterable[Tag]) -> Task:
        """Return a copy of this task carrying *tags* instead of its own."""
        return self._rebuild(tags=tags)

    def _rebuild(self, **changes: Any) -> Task:
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        logger.debug("Rebuilding task %r with new %s", str(self.title), ", ".join(changes))
        return Task(**values)

    def get_fields(self) -> list[tuple[str, str]]:
        """Return (field name, display string) pairs in display order.

        The order is Title, Duration, Status, Deadline, Description,
        Recurring Schedule. Renderers lay fields out by position, so it must
        not change.
        """
        return [
            (Title.FIELD_NAME, str(self.title)),
            (Duration.FIELD_NAME, str(self.duration)),
            (Status.FIELD_NAME, str(self.status)),
            (Deadline.FIELD_NAME, str(self.deadline)),
            (Description.FIELD_NAME, str(self.description)),
            (RecurringSchedule.FIELD_NAME, str(self.recurring_schedule)),
        ]

    def is_same_task(self, other: Task | None) -> bool:
        """Return True if both tasks have the same title.

        This is a weaker notion of equality than ``==``, used to detect
        duplicates.
        """
        if other is self:
            return True
        return other is not None and other.title == self.title

    def date_over(self) -> bool:
        return self.deadline.over()

    def has_expired(self) -> bool:
        return self.recurring_schedule.is_expired()

    def is_deadline_empty(self) -> bool:
        return self.deadline.is_empty_value()

    def is_duration_empty(self) -> bool:
        return self.duration.is_empty_value()

    def is_recurring_schedule_empty(self) -> bool:
        return self.recurring_schedule.is_empty_value()

    def is_done(self) -> bool:
        return self.status.is_done()

    def __str__(self) -> str:
        parts = [
            str(self.title),
            f"{Deadline.FIELD_NAME}: {self.deadline}",
            f"{Duration.FIELD_NAME}: {self.duration}",
            f"{RecurringSchedule.FIELD_NAME}: {self.recurring_schedule}",
            f"{Description.FIELD_NAME}: {self.description}",
            f"{Status.FIELD_NAME}: {self.status}",
        ]
        if self.tags:
            ordered = sorted(self.tags, key=lambda tag: tag.value)
            parts.append(f"{TAGS_LABEL}: " + "".join(str(tag) for tag in ordered))
        return "; \n".join(parts)
