from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .entities import TaskList, TaskListSnapshot
from .errors import NotFoundError
from .ports import ListUid, TaskUid
from .seed import default_lists


class TaskListsRepo:
    """
    In-memory owner of every task list and task.

    Reads hand out frozen snapshots so callers can never mutate repository
    state directly; ``toggle_task`` is the only mutation. No change events are
    emitted, callers re-render after mutating.

    Unknown list uids raise :class:`NotFoundError` for both reads and
    mutations. An unknown task uid inside an existing list is ignored.
    """

    def __init__(self, lists: Iterable[TaskList] = ()) -> None:
        self._log = logging.getLogger(__name__)
        # dicts keep insertion order, which is the only ordering lists have
        self._lists: Dict[ListUid, TaskList] = {}
        for task_list in lists:
            if task_list.uid in self._lists:
                raise ValueError(f"Duplicate list uid '{task_list.uid}'.")
            self._lists[task_list.uid] = task_list

    @classmethod
    def seeded(cls, lists: Optional[Iterable[TaskList]] = None) -> "TaskListsRepo":
        """Build a repository from ``lists`` or the built-in fixture."""
        return cls(default_lists() if lists is None else lists)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #
    def get(self, list_uid: ListUid) -> TaskListSnapshot:
        return self._require(list_uid).snapshot()

    def all(self) -> List[TaskListSnapshot]:
        """Return every list in insertion order."""
        return [task_list.snapshot() for task_list in self._lists.values()]

    def pending_count(self, list_uid: ListUid) -> int:
        """Return how many tasks of ``list_uid`` are not done."""
        return self._require(list_uid).pending_count()

    def __contains__(self, list_uid: object) -> bool:
        return list_uid in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #
    def toggle_task(self, list_uid: ListUid, task_uid: TaskUid) -> None:
        """Flip the ``done`` flag of one task in place.

        Raises:
            NotFoundError: When ``list_uid`` is unknown.
        """
        task = self._require(list_uid).find_task(task_uid)
        if task is None:
            self._log.debug("toggle ignored: no task %s in list %s", task_uid, list_uid)
            return
        task.done = not task.done
        self._log.debug("toggled %s/%s -> done=%s", list_uid, task_uid, task.done)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _require(self, list_uid: ListUid) -> TaskList:
        task_list = self._lists.get(list_uid)
        if task_list is None:
            raise NotFoundError(list_uid)
        return task_list


__all__ = ["TaskListsRepo"]
