"""Presentation tokens shared by the sidebar and detail view builders.

Call context:
    ``sidebar_view`` and ``list_detail_view`` call these helpers so every
    render capability shows the same markers and texts.
"""

from __future__ import annotations

SIDEBAR_HEADING = "Lists"
SELECTED_MARKER = "- "
DONE_LABEL = "X"
PENDING_LABEL = "O"
EMPTY_LIST_MESSAGE = "No task so far, add one?"


def list_label(name: str, *, selected: bool) -> str:
    """Prefix the selected list's name with the selection marker."""
    return f"{SELECTED_MARKER}{name}" if selected else name


def count_text(todos_count: int) -> str:
    """Show a pending count only when it is positive; zero renders empty."""
    return str(todos_count) if todos_count > 0 else ""


def toggle_label(done: bool) -> str:
    return DONE_LABEL if done else PENDING_LABEL


__all__ = [
    "DONE_LABEL",
    "EMPTY_LIST_MESSAGE",
    "PENDING_LABEL",
    "SELECTED_MARKER",
    "SIDEBAR_HEADING",
    "count_text",
    "list_label",
    "toggle_label",
]
