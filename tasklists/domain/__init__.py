"""Domain package exports for task-list entities, errors, and the repository."""

from .entities import Task, TaskList, TaskListSnapshot, TaskSnapshot
from .errors import (
    InvalidTransitionError,
    NotFoundError,
    SeedFormatError,
    TaskListsError,
)
from .repository import TaskListsRepo

__all__ = [
    "InvalidTransitionError",
    "NotFoundError",
    "SeedFormatError",
    "Task",
    "TaskList",
    "TaskListSnapshot",
    "TaskListsError",
    "TaskListsRepo",
    "TaskSnapshot",
]
