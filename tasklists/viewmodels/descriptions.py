"""Immutable view descriptions consumed by render capabilities.

Each description is a frozen dataclass. Row callbacks are zero-argument
callables that forward user intent; they are excluded from equality so two
builds from equal inputs compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, Union

OnActivate = Callable[[], None]


def _noop() -> None:
    return None


@dataclass(frozen=True)
class SidebarRow:
    """One navigable entry of the list-of-lists sidebar."""

    uid: str
    label: str
    count_text: str
    selected: bool
    on_click: OnActivate = field(default=_noop, compare=False, repr=False)


@dataclass(frozen=True)
class SidebarDescription:
    heading: str
    rows: Tuple[SidebarRow, ...] = ()


@dataclass(frozen=True)
class TaskRow:
    """One task line of the detail pane with its toggle control."""

    uid: str
    name: str
    done: bool
    toggle_label: str
    on_toggle: OnActivate = field(default=_noop, compare=False, repr=False)


@dataclass(frozen=True)
class ListDetailDescription:
    """Detail pane content; ``empty_message`` is set only when ``rows`` is empty."""

    heading: str
    rows: Tuple[TaskRow, ...] = ()
    empty_message: Optional[str] = None


ViewDescription = Union[SidebarDescription, ListDetailDescription]


def describe_as_text(description: ViewDescription) -> str:
    """Flatten a description into plain text lines (logs, smoke tests)."""
    lines = [description.heading]
    if isinstance(description, SidebarDescription):
        for row in description.rows:
            lines.append(f"{row.label} {row.count_text}".rstrip())
    else:
        if description.empty_message is not None:
            lines.append(description.empty_message)
        for row in description.rows:
            lines.append(f"[{row.toggle_label}] {row.name}")
    return "\n".join(lines)


__all__ = [
    "ListDetailDescription",
    "OnActivate",
    "SidebarDescription",
    "SidebarRow",
    "TaskRow",
    "ViewDescription",
    "describe_as_text",
]
