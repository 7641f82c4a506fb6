"""Task planner domain models.

Immutable field value objects, the Task aggregate built from them, and the
predicates used to filter task lists.
"""

from .clock import Clock, FixedClock, SystemClock, get_default_clock, set_default_clock
from .dates import Date
from .deadline import Deadline
from .fields import Description, Duration, Email, FieldValue, Status, Tag, Title
from .predicates import (
    TaskOnDatePredicate,
    TaskWithinWeekPredicate,
    TitleContainsKeywordsPredicate,
    filter_tasks,
)
from .recurring_schedule import RecurringSchedule
from .task import Task

__all__ = [
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    "get_default_clock",
    "set_default_clock",
    # Fields
    "FieldValue",
    "Title",
    "Description",
    "Status",
    "Email",
    "Duration",
    "Tag",
    "Date",
    "Deadline",
    "RecurringSchedule",
    # Task
    "Task",
    # Filtering
    "TaskOnDatePredicate",
    "TaskWithinWeekPredicate",
    "TitleContainsKeywordsPredicate",
    "filter_tasks",
]
