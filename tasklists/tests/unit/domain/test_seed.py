from __future__ import annotations

import pytest

from tasklists.domain.errors import SeedFormatError
from tasklists.domain.seed import default_lists, lists_from_payload


def test_default_lists_are_fresh_each_call() -> None:
    first = default_lists()
    first[0].tasks[0].done = True

    assert default_lists()[0].tasks[0].done is False


def test_lists_from_payload_builds_entities_in_order() -> None:
    payload = {
        "lists": [
            {"uid": "b", "name": "Beta", "tasks": [{"uid": "1", "name": "One", "done": True}]},
            {"uid": "a", "name": "Alpha"},
        ]
    }

    lists = lists_from_payload(payload)

    assert [item.uid for item in lists] == ["b", "a"]
    assert lists[0].tasks[0].done is True
    assert lists[1].tasks == []


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"lists": {}},
        {"lists": ["nope"]},
        {"lists": [{"uid": "a", "name": "A", "tasks": {}}]},
        {"lists": [{"uid": "a", "name": "A", "tasks": ["nope"]}]},
        {"lists": [{"uid": "", "name": "A"}]},
        {"lists": [{"uid": "a", "name": "A", "tasks": [{"uid": "1", "name": "x", "done": "no"}]}]},
        {"lists": [{"uid": "a", "name": "A", "tasks": [{"uid": "1", "name": "x"}, {"uid": "1", "name": "y"}]}]},
        {"lists": [{"uid": "x", "name": "X"}, {"uid": "x", "name": "Again"}]},
    ],
)
def test_lists_from_payload_rejects_malformed_seeds(payload) -> None:
    with pytest.raises(SeedFormatError) as info:
        lists_from_payload(payload)

    assert info.value.code == "INVALID_SEED"
