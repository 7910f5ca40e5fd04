from __future__ import annotations

import sys

import pytest

from tasklists.web_ui import main as web_main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ROOT_ID", "INITIAL_LIST", "SEED_PATH", "TITLE", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(f"TASKLISTS_{name}", raising=False)


def test_smoke_test_prints_sidebar_rows(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["tasklists-web", "--smoke-test"])

    web_main.main()

    assert capsys.readouterr().out.strip() == "web-smoke-ok ['- Inbox 1', 'Other', 'Waiting']"
