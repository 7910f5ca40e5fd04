from __future__ import annotations

import pytest

from tasklists.domain.entities import Task, TaskList
from tasklists.domain.errors import NotFoundError
from tasklists.domain.repository import TaskListsRepo


def _repo() -> TaskListsRepo:
    return TaskListsRepo(
        [
            TaskList(
                uid="work",
                name="Work",
                tasks=[Task("t1", "Write report"), Task("t2", "Review"), Task("t3", "Ship")],
            ),
            TaskList(uid="home", name="Home", tasks=[Task("t1", "Dishes", done=True)]),
            TaskList(uid="empty", name="Empty"),
        ]
    )


def test_seeded_repository_has_default_lists() -> None:
    repo = TaskListsRepo.seeded()

    assert [item.uid for item in repo.all()] == ["inbox", "other", "waiting"]
    inbox = repo.get("inbox")
    assert inbox.name == "Inbox"
    assert [(t.uid, t.name, t.done) for t in inbox.tasks] == [("a", "Do something", False)]


def test_seeded_repositories_do_not_share_entities() -> None:
    first = TaskListsRepo.seeded()
    second = TaskListsRepo.seeded()

    first.toggle_task("inbox", "a")

    assert second.get("inbox").tasks[0].done is False


def test_duplicate_list_uids_are_rejected() -> None:
    with pytest.raises(ValueError):
        TaskListsRepo([TaskList("x", "X"), TaskList("x", "Again")])


def test_get_unknown_list_raises_not_found() -> None:
    repo = _repo()

    with pytest.raises(NotFoundError) as info:
        repo.get("missing")

    assert info.value.uid == "missing"
    assert info.value.code == "LIST_NOT_FOUND"


def test_toggle_unknown_list_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        _repo().toggle_task("missing", "t1")


def test_toggle_unknown_task_is_a_noop() -> None:
    repo = _repo()
    before = repo.all()

    repo.toggle_task("work", "nope")

    assert repo.all() == before


def test_toggle_flips_once_and_twice_restores() -> None:
    repo = _repo()

    repo.toggle_task("work", "t2")
    assert repo.get("work").tasks[1].done is True

    repo.toggle_task("work", "t2")
    assert repo.get("work").tasks[1].done is False


def test_task_uids_are_scoped_to_their_list() -> None:
    repo = _repo()

    repo.toggle_task("home", "t1")

    assert repo.get("home").tasks[0].done is False
    assert repo.get("work").tasks[0].done is False


def test_order_is_preserved_across_toggles() -> None:
    repo = _repo()

    for task_uid in ("t3", "t1", "t3", "t2"):
        repo.toggle_task("work", task_uid)

    assert [item.uid for item in repo.all()] == ["work", "home", "empty"]
    assert [t.uid for t in repo.get("work").tasks] == ["t1", "t2", "t3"]


def test_pending_count_is_fresh_after_mutation() -> None:
    repo = _repo()
    assert repo.pending_count("work") == 3

    repo.toggle_task("work", "t1")

    assert repo.pending_count("work") == 2
    assert repo.pending_count("home") == 0
    assert repo.pending_count("empty") == 0


def test_membership_and_length() -> None:
    repo = _repo()

    assert "home" in repo
    assert "missing" not in repo
    assert len(repo) == 3
