from __future__ import annotations

import dataclasses

import pytest

from tasklists.domain.entities import Task, TaskList


def test_task_list_rejects_duplicate_task_uids() -> None:
    with pytest.raises(ValueError):
        TaskList(uid="inbox", name="Inbox", tasks=[Task("a", "One"), Task("a", "Two")])


@pytest.mark.parametrize("uid,name", [("", "Inbox"), ("inbox", "  "), (None, "Inbox")])
def test_task_list_requires_text_fields(uid, name) -> None:
    with pytest.raises(ValueError):
        TaskList(uid=uid, name=name)


def test_task_done_must_be_bool() -> None:
    with pytest.raises(TypeError):
        Task(uid="a", name="Do something", done="yes")


def test_snapshot_is_a_frozen_copy() -> None:
    task_list = TaskList(uid="inbox", name="Inbox", tasks=[Task("a", "Do something")])
    snapshot = task_list.snapshot()

    task_list.tasks[0].done = True

    assert snapshot.tasks[0].done is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.tasks[0].done = True  # type: ignore[misc]
    assert isinstance(snapshot.tasks, tuple)


def test_pending_count_counts_not_done_tasks() -> None:
    task_list = TaskList(
        uid="l",
        name="L",
        tasks=[Task("a", "A"), Task("b", "B", done=True), Task("c", "C")],
    )

    assert task_list.pending_count() == 2
    assert task_list.snapshot().pending_count == 2
