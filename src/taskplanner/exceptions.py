"""Custom exceptions for the task planner model."""


class TaskPlannerError(Exception):
    """Base exception for all task planner errors."""


class InvalidFieldError(TaskPlannerError, ValueError):
    """Raised when a raw string fails a field's validation rule.

    Attributes:
        field_name: Display name of the field that rejected the input
        message: The field's constraint message
    """

    def __init__(self, field_name: str, message: str):
        super().__init__(message)
        self.field_name = field_name
        self.message = message


class PreconditionError(TaskPlannerError):
    """Raised on programmer errors such as a missing field or a query on an empty value."""


class ConfigError(TaskPlannerError):
    """Raised when the configuration file cannot be read or written."""
