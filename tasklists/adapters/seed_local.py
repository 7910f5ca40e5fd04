from __future__ import annotations

import json
import os
from typing import List

from tasklists.domain.entities import TaskList
from tasklists.domain.errors import SeedFormatError
from tasklists.domain.ports import SeedPort
from tasklists.domain.seed import lists_from_payload


class SeedLocal(SeedPort):
    """Read initial task lists from a local JSON file."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load_lists(self) -> List[TaskList]:
        if not os.path.exists(self.path):
            raise SeedFormatError(f"Seed file not found: {self.path}")
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except UnicodeDecodeError as e:
                raise SeedFormatError(f"Seed file {self.path} is not UTF-8 text: {e}") from e
            except json.JSONDecodeError as e:
                raise SeedFormatError(f"Seed file {self.path} is not valid JSON: {e}") from e
        return lists_from_payload(payload)
