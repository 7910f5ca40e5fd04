"""Domain-level error types shared by the repository, controller, and adapters.

Every error carries a stable ``code`` next to its message so runtimes at the
outermost boundary can log or display failures without string matching.
"""
from __future__ import annotations

from typing import Optional


class TaskListsError(Exception):
    """Base class for task-list errors."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class NotFoundError(TaskListsError):
    """A list uid did not resolve to a list owned by the repository."""

    def __init__(self, uid: str, message: Optional[str] = None):
        super().__init__("LIST_NOT_FOUND", message or f"No task list with uid '{uid}'.")
        self.uid = uid


class InvalidTransitionError(TaskListsError):
    """A controller transition was requested before ``load`` ran."""

    def __init__(self, action: str):
        super().__init__(
            "NOT_LOADED", f"Cannot {action}: the lists controller is not loaded yet."
        )
        self.action = action


class SeedFormatError(TaskListsError):
    """Seed payload could not be turned into task lists."""

    def __init__(self, message: str):
        super().__init__("INVALID_SEED", message)


__all__ = [
    "InvalidTransitionError",
    "NotFoundError",
    "SeedFormatError",
    "TaskListsError",
]
