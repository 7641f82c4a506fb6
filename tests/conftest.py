"""Shared test fixtures.

Every date-dependent object is built against a FixedClock so tests never
depend on the real date.
"""

from __future__ import annotations

from datetime import date

import pytest

from taskplanner.models import (
    Deadline,
    Description,
    Duration,
    FixedClock,
    RecurringSchedule,
    Status,
    Tag,
    Task,
    Title,
    get_default_clock,
    set_default_clock,
)

TODAY = date(2021, 5, 1)


# ---------------------------------------------------------------------------
# Task builder
# ---------------------------------------------------------------------------


class TaskBuilder:
    """Builds Task objects from raw strings, starting from sensible defaults."""

    DEFAULT_TITLE = "Write project report"
    DEFAULT_DEADLINE = "20/05/2021"
    DEFAULT_DURATION = "10:00-12:00"
    DEFAULT_RECURRING_SCHEDULE = ""
    DEFAULT_DESCRIPTION = "Draft the final section"
    DEFAULT_STATUS = "not done"

    def __init__(self, clock: FixedClock, task: Task | None = None):
        self.clock = clock
        if task is None:
            self.title = Title(self.DEFAULT_TITLE)
            self.deadline = Deadline(self.DEFAULT_DEADLINE, clock=clock)
            self.duration = Duration(self.DEFAULT_DURATION)
            self.recurring_schedule = RecurringSchedule(
                self.DEFAULT_RECURRING_SCHEDULE, clock=clock
            )
            self.description = Description(self.DEFAULT_DESCRIPTION)
            self.status = Status(self.DEFAULT_STATUS)
            self.tags: set[Tag] = set()
        else:
            self.title = task.title
            self.deadline = task.deadline
            self.duration = task.duration
            self.recurring_schedule = task.recurring_schedule
            self.description = task.description
            self.status = task.status
            self.tags = set(task.tags)

    def with_title(self, title: str) -> TaskBuilder:
        self.title = Title(title)
        return self

    def with_deadline(self, deadline: str) -> TaskBuilder:
        self.deadline = Deadline(deadline, clock=self.clock)
        return self

    def with_duration(self, duration: str) -> TaskBuilder:
        self.duration = Duration(duration)
        return self

    def with_recurring_schedule(self, schedule: str) -> TaskBuilder:
        self.recurring_schedule = RecurringSchedule(schedule, clock=self.clock)
        return self

    def with_description(self, description: str) -> TaskBuilder:
        self.description = Description(description)
        return self

    def with_status(self, status: str) -> TaskBuilder:
        self.status = Status(status)
        return self

    def with_tags(self, *tags: str) -> TaskBuilder:
        self.tags = {Tag(tag) for tag in tags}
        return self

    def build(self) -> Task:
        return Task(
            self.title,
            self.deadline,
            self.duration,
            self.recurring_schedule,
            self.description,
            self.status,
            self.tags,
        )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock() -> FixedClock:
    """A clock whose today is 01/05/2021."""
    return FixedClock(TODAY)


@pytest.fixture()
def task_builder(clock):
    """Factory for TaskBuilder instances bound to the test clock."""

    def _make(task: Task | None = None) -> TaskBuilder:
        return TaskBuilder(clock, task)

    return _make


@pytest.fixture()
def typical_tasks(task_builder) -> list[Task]:
    """A fixed task list; the 2nd and 5th tasks are due on 27/05/2021."""
    return [
        task_builder().with_title("Buy groceries").with_deadline("03/05/2021")
        .with_tags("home").build(),
        task_builder().with_title("Submit tax return").with_deadline("27/05/2021")
        .with_duration("09:00-10:00").build(),
        task_builder().with_title("Read chapter four").with_deadline("").with_duration("")
        .build(),
        task_builder().with_title("Plan sprint").with_deadline("06/05/2021")
        .with_recurring_schedule("30/06/2021;weekly").with_tags("work").build(),
        task_builder().with_title("Team lunch").with_deadline("27/05/2021")
        .with_duration("12:00-13:30").with_tags("work", "social").build(),
        task_builder().with_title("Renew passport").with_deadline("15/06/2021")
        .with_status("done").build(),
    ]


@pytest.fixture()
def default_clock(clock):
    """Install the test clock as the module default, restoring it afterwards."""
    original = get_default_clock()
    set_default_clock(clock)
    yield clock
    set_default_clock(original)
