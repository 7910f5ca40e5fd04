from __future__ import annotations

import logging
from typing import Optional

from ..adapters.seed_local import SeedLocal
from ..domain.ports import RenderPort, RootPort
from ..domain.repository import TaskListsRepo
from .controller import ListsController
from .settings import AppSettings


def build_repository(settings: AppSettings) -> TaskListsRepo:
    """Seed from ``settings.seed_path`` when set, otherwise from the built-in lists."""
    if settings.seed_path:
        return TaskListsRepo.seeded(SeedLocal(settings.seed_path).load_lists())
    return TaskListsRepo.seeded()


class Application:
    """Composition root: one repository, one root attachment, one controller."""

    def __init__(
        self,
        root: RootPort,
        renderer: RenderPort,
        *,
        repo: Optional[TaskListsRepo] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.settings = settings or AppSettings()
        self.root = root
        self.renderer = renderer
        self.lists = repo if repo is not None else build_repository(self.settings)
        self.current_controller: Optional[ListsController] = None

    def load(self) -> ListsController:
        """Create a fresh controller and show the configured initial list."""
        controller = ListsController(
            self.lists, self.root, self.renderer, header=self.settings.title
        )
        self.current_controller = controller
        self._log.info(
            "starting with %d lists, initial list %s",
            len(self.lists),
            self.settings.initial_list_uid,
        )
        controller.load(self.settings.initial_list_uid)
        return controller


__all__ = ["Application", "build_repository"]
