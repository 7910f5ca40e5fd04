"""Sidebar view builder: list-of-lists rows with pending counts.

Call context:
    ``ListsController.rerender`` derives one :class:`SidebarItem` per list
    (counts included) and calls :func:`build_sidebar_view` with its
    ``select_list`` handler as ``on_list_click``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterable

from .descriptions import SidebarDescription, SidebarRow
from .labels import SIDEBAR_HEADING, count_text, list_label


@dataclass(frozen=True)
class SidebarItem:
    """Derived sidebar input; ``todos_count`` is computed by the caller."""

    uid: str
    name: str
    todos_count: int
    selected: bool


def build_sidebar_view(
    lists: Iterable[SidebarItem],
    on_list_click: Callable[[str], None],
) -> SidebarDescription:
    """Describe the sidebar for ``lists`` in the given order.

    Args:
        lists: Sidebar items in display order.
        on_list_click: Invoked with the row's list uid when a row is activated.

    Returns:
        A :class:`SidebarDescription` with one row per item.
    """
    rows = tuple(
        SidebarRow(
            uid=item.uid,
            label=list_label(item.name, selected=item.selected),
            count_text=count_text(item.todos_count),
            selected=item.selected,
            on_click=partial(on_list_click, item.uid),
        )
        for item in lists
    )
    return SidebarDescription(heading=SIDEBAR_HEADING, rows=rows)


__all__ = ["SidebarItem", "build_sidebar_view"]
