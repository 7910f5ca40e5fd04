"""Default fixture lists and conversion of raw seed payloads into entities.

Call context:
    ``TaskListsRepo.seeded`` uses :func:`default_lists`; ``SeedLocal`` feeds
    parsed JSON through :func:`lists_from_payload`.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from .entities import Task, TaskList
from .errors import SeedFormatError


def default_lists() -> List[TaskList]:
    """Return fresh copies of the built-in lists (``inbox``, ``other``, ``waiting``)."""
    return [
        TaskList(
            uid="inbox",
            name="Inbox",
            tasks=[Task(uid="a", name="Do something", done=False)],
        ),
        TaskList(uid="other", name="Other"),
        TaskList(uid="waiting", name="Waiting"),
    ]


def lists_from_payload(payload: Any) -> List[TaskList]:
    """Build task lists from a ``{"lists": [...]}`` mapping.

    Args:
        payload: Decoded seed document. Each list entry needs ``uid`` and
            ``name``; ``tasks`` is optional and each task needs ``uid`` and
            ``name`` with an optional boolean ``done``.

    Returns:
        Task lists in document order.

    Raises:
        SeedFormatError: When the payload shape or any entity is invalid.
    """
    if not isinstance(payload, Mapping):
        raise SeedFormatError("Seed must be a JSON object with a 'lists' array.")
    raw_lists = payload.get("lists")
    if not isinstance(raw_lists, list):
        raise SeedFormatError("Seed field 'lists' must be an array.")
    lists = [_list_from_entry(index, entry) for index, entry in enumerate(raw_lists)]
    seen = set()
    for index, task_list in enumerate(lists):
        if task_list.uid in seen:
            raise SeedFormatError(f"lists[{index}]: duplicate list uid '{task_list.uid}'.")
        seen.add(task_list.uid)
    return lists


def _list_from_entry(index: int, entry: Any) -> TaskList:
    if not isinstance(entry, Mapping):
        raise SeedFormatError(f"lists[{index}] must be an object.")
    raw_tasks = entry.get("tasks", [])
    if not isinstance(raw_tasks, list):
        raise SeedFormatError(f"lists[{index}].tasks must be an array.")
    try:
        return TaskList(
            uid=entry.get("uid"),
            name=entry.get("name"),
            tasks=list(_tasks_from_entries(index, raw_tasks)),
        )
    except (TypeError, ValueError) as exc:
        raise SeedFormatError(f"lists[{index}]: {exc}") from exc


def _tasks_from_entries(list_index: int, entries: Iterable[Any]) -> Iterable[Task]:
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise SeedFormatError(f"lists[{list_index}].tasks[{index}] must be an object.")
        yield Task(
            uid=entry.get("uid"),
            name=entry.get("name"),
            done=entry.get("done", False),
        )


__all__ = ["default_lists", "lists_from_payload"]
