from __future__ import annotations

from typing import List

from tasklists.domain.entities import TaskSnapshot
from tasklists.viewmodels.descriptions import describe_as_text
from tasklists.viewmodels.labels import EMPTY_LIST_MESSAGE
from tasklists.viewmodels.list_detail_view import ListDetailData, build_list_detail_view


def _data() -> ListDetailData:
    return ListDetailData(
        name="Inbox",
        tasks=(
            TaskSnapshot(uid="a", name="Do something", done=False),
            TaskSnapshot(uid="b", name="Done already", done=True),
        ),
    )


def test_rows_carry_toggle_labels_in_stored_order() -> None:
    view = build_list_detail_view(_data(), lambda uid: None)

    assert view.heading == "Inbox"
    assert view.empty_message is None
    assert [(r.uid, r.name, r.done, r.toggle_label) for r in view.rows] == [
        ("a", "Do something", False, "O"),
        ("b", "Done already", True, "X"),
    ]


def test_toggle_forwards_task_uid() -> None:
    toggled: List[str] = []
    view = build_list_detail_view(_data(), toggled.append)

    view.rows[1].on_toggle()

    assert toggled == ["b"]


def test_empty_list_shows_empty_state_message() -> None:
    view = build_list_detail_view(ListDetailData(name="Other", tasks=()), lambda uid: None)

    assert view.rows == ()
    assert view.empty_message == EMPTY_LIST_MESSAGE
    assert describe_as_text(view) == f"Other\n{EMPTY_LIST_MESSAGE}"


def test_builder_is_pure() -> None:
    data = _data()

    assert build_list_detail_view(data, print) == build_list_detail_view(data, lambda uid: None)
    assert data == _data()


def test_text_form_lists_markers() -> None:
    view = build_list_detail_view(_data(), lambda uid: None)

    assert describe_as_text(view).splitlines() == ["Inbox", "[O] Do something", "[X] Done already"]
