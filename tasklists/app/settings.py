from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

_ENV_PREFIX = "TASKLISTS_"


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings for the application shell, read from the environment."""

    root_id: str = "app"
    initial_list_uid: str = "inbox"
    seed_path: Optional[str] = None
    title: str = "Tasks"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppSettings":
        """Build settings from ``TASKLISTS_*`` variables; blanks keep defaults.

        Recognized variables: ``TASKLISTS_ROOT_ID``, ``TASKLISTS_INITIAL_LIST``,
        ``TASKLISTS_SEED_PATH`` and ``TASKLISTS_TITLE``.
        """
        env = os.environ if environ is None else environ
        names = {
            "root_id": "ROOT_ID",
            "initial_list_uid": "INITIAL_LIST",
            "seed_path": "SEED_PATH",
            "title": "TITLE",
        }
        values = {}
        for item in fields(cls):
            raw = (env.get(_ENV_PREFIX + names[item.name]) or "").strip()
            if raw:
                values[item.name] = raw
        return cls(**values)


__all__ = ["AppSettings"]
