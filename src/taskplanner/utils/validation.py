"""Argument checks shared by the model constructors."""

from __future__ import annotations

from typing import Any

from taskplanner.exceptions import PreconditionError


def require_non_null(value: Any, name: str) -> Any:
    """Return *value*, raising PreconditionError if it is None."""
    if value is None:
        raise PreconditionError(f"{name} must not be None")
    return value


def require_all_non_null(**values: Any) -> None:
    """Raise PreconditionError naming every argument that is None.

    Args:
        **values: Argument names mapped to the values passed for them
    """
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise PreconditionError(f"Missing required field(s): {', '.join(missing)}")
