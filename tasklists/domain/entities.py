from __future__ import annotations

"""Task and list entities owned by the repository, plus their read-only snapshots."""

from dataclasses import dataclass, field
from typing import List, Tuple


def _require_text(kind: str, attr: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{kind}.{attr} must be a non-empty string.")


@dataclass
class Task:
    """Named unit of work with a binary done/not-done status."""

    uid: str
    """Identifier unique within the owning list (not globally)."""

    name: str
    done: bool = False

    def __post_init__(self) -> None:
        _require_text("Task", "uid", self.uid)
        _require_text("Task", "name", self.name)
        if not isinstance(self.done, bool):
            raise TypeError("Task.done must be a bool.")

    def snapshot(self) -> "TaskSnapshot":
        return TaskSnapshot(uid=self.uid, name=self.name, done=self.done)


@dataclass
class TaskList:
    """Named, ordered collection of tasks.

    Instances are owned by :class:`~tasklists.domain.repository.TaskListsRepo`;
    everything outside the repository works with :class:`TaskListSnapshot`.
    """

    uid: str
    """Globally unique list identifier."""

    name: str
    tasks: List[Task] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require_text("TaskList", "uid", self.uid)
        _require_text("TaskList", "name", self.name)
        seen = set()
        for task in self.tasks:
            if task.uid in seen:
                raise ValueError(
                    f"Duplicate task uid '{task.uid}' in list '{self.uid}'."
                )
            seen.add(task.uid)

    def find_task(self, task_uid: str) -> Task | None:
        for task in self.tasks:
            if task.uid == task_uid:
                return task
        return None

    def pending_count(self) -> int:
        """Return the number of tasks that are not done."""
        return sum(1 for task in self.tasks if not task.done)

    def snapshot(self) -> "TaskListSnapshot":
        return TaskListSnapshot(
            uid=self.uid,
            name=self.name,
            tasks=tuple(task.snapshot() for task in self.tasks),
        )


@dataclass(frozen=True)
class TaskSnapshot:
    """Immutable copy of a task handed to view builders."""

    uid: str
    name: str
    done: bool


@dataclass(frozen=True)
class TaskListSnapshot:
    """Immutable copy of a list and its tasks in stored order."""

    uid: str
    name: str
    tasks: Tuple[TaskSnapshot, ...] = ()

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self.tasks if not task.done)


__all__ = ["Task", "TaskList", "TaskListSnapshot", "TaskSnapshot"]
