from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Sequence

from tasklists.domain.entities import TaskSnapshot

from .descriptions import ListDetailDescription, TaskRow
from .labels import EMPTY_LIST_MESSAGE, toggle_label


@dataclass(frozen=True)
class ListDetailData:
    name: str
    tasks: Sequence[TaskSnapshot]


def build_list_detail_view(
    data: ListDetailData,
    on_toggle_task: Callable[[str], None],
) -> ListDetailDescription:
    """Describe the detail pane: heading, then task rows or the empty state."""
    if not data.tasks:
        return ListDetailDescription(heading=data.name, empty_message=EMPTY_LIST_MESSAGE)
    rows = tuple(
        TaskRow(
            uid=task.uid,
            name=task.name,
            done=task.done,
            toggle_label=toggle_label(task.done),
            on_toggle=partial(on_toggle_task, task.uid),
        )
        for task in data.tasks
    )
    return ListDetailDescription(heading=data.name, rows=rows)


__all__ = ["ListDetailData", "build_list_detail_view"]
