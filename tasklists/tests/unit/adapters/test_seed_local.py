from __future__ import annotations

import json

import pytest

from tasklists.adapters.seed_local import SeedLocal
from tasklists.domain.errors import SeedFormatError


def test_load_lists_from_file(tmp_path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps(
            {
                "lists": [
                    {"uid": "inbox", "name": "Inbox", "tasks": [{"uid": "a", "name": "Café", "done": False}]},
                    {"uid": "later", "name": "Later"},
                ]
            },
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )

    lists = SeedLocal(str(path)).load_lists()

    assert [item.uid for item in lists] == ["inbox", "later"]
    assert lists[0].tasks[0].name == "Café"


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(SeedFormatError):
        SeedLocal(str(tmp_path / "absent.json")).load_lists()


def test_invalid_json_raises(tmp_path) -> None:
    path = tmp_path / "seed.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SeedFormatError):
        SeedLocal(str(path)).load_lists()


def test_duplicate_list_uids_raise(tmp_path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps({"lists": [{"uid": "x", "name": "X"}, {"uid": "x", "name": "Again"}]}),
        encoding="utf-8",
    )

    with pytest.raises(SeedFormatError) as info:
        SeedLocal(str(path)).load_lists()

    assert "duplicate list uid 'x'" in info.value.message


def test_non_utf8_file_raises(tmp_path) -> None:
    path = tmp_path / "seed.json"
    path.write_bytes(b'{"lists": [{"uid": "\xff", "name": "X"}]}')

    with pytest.raises(SeedFormatError) as info:
        SeedLocal(str(path)).load_lists()

    assert info.value.code == "INVALID_SEED"
