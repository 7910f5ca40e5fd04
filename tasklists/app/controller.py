"""Selection state machine that keeps both panes in sync with the repository.

``ListsController`` is the only component that turns user intent into
repository mutations or selection changes. Every transition ends with a total
re-render of the sidebar and the detail pane from fresh snapshots, so there is
no incremental update path to keep consistent.
"""

from __future__ import annotations

import enum
import logging
from typing import Dict, List, Optional

from ..domain.errors import InvalidTransitionError
from ..domain.ports import ListUid, RenderPort, RenderTarget, RootPort, TaskUid
from ..domain.repository import TaskListsRepo
from ..viewmodels.list_detail_view import ListDetailData, build_list_detail_view
from ..viewmodels.sidebar_view import SidebarItem, build_sidebar_view

SIDEBAR_REGION = "sidebar"
DETAIL_REGION = "detail"


class ControllerState(enum.Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"


class ListsController:
    """Own the selected list and mediate between views and the repository.

    Call chain:
        ``Application.load`` creates one instance and calls :meth:`load`.
        Sidebar rows call :meth:`select_list`; task toggles call
        :meth:`toggle_task`.
    """

    def __init__(
        self,
        repo: TaskListsRepo,
        root: RootPort,
        renderer: RenderPort,
        *,
        header: str = "Tasks",
    ) -> None:
        """Bind the controller to its collaborators.

        Args:
            repo: Repository owning every list; passed explicitly, never global.
            root: Attachment point the scaffold regions are mounted into.
            renderer: Render capability receiving both view descriptions.
            header: Text shown above the two panes.
        """
        self._log = logging.getLogger(__name__)
        self._repo = repo
        self._root = root
        self._renderer = renderer
        self._header = header
        self._regions: Dict[str, RenderTarget] = {}
        self.selected_list_uid: Optional[ListUid] = None

    @property
    def state(self) -> ControllerState:
        if self.selected_list_uid is None:
            return ControllerState.UNLOADED
        return ControllerState.LOADED

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def load(self, list_uid: ListUid) -> None:
        """Select ``list_uid``, rebuild the two regions, then render both panes.

        Raises:
            NotFoundError: ``list_uid`` is unknown; the selection is unchanged.
        """
        self._repo.get(list_uid)
        self.selected_list_uid = list_uid
        self._regions = self._root.mount_regions(
            self._header, (SIDEBAR_REGION, DETAIL_REGION)
        )
        self._log.debug("loaded list %s into root %s", list_uid, self._root.root_id)
        self.rerender()

    def select_list(self, list_uid: ListUid) -> None:
        """Switch the detail pane to ``list_uid`` without rebuilding regions."""
        self._require_loaded("select a list")
        self._repo.get(list_uid)
        self.selected_list_uid = list_uid
        self._log.debug("selected list %s", list_uid)
        self.rerender()

    def toggle_task(self, task_uid: TaskUid) -> None:
        """Flip a task of the selected list; both panes re-render (counts change)."""
        list_uid = self._require_loaded("toggle a task")
        self._repo.toggle_task(list_uid, task_uid)
        self.rerender()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def rerender(self) -> None:
        """Rebuild both descriptions from current state and render them.

        A ``NotFoundError`` from the repository means the selection drifted
        away from repository state; it propagates untouched.
        """
        list_uid = self._require_loaded("render")
        selected = self._repo.get(list_uid)

        sidebar = build_sidebar_view(self._sidebar_items(), self.select_list)
        detail = build_list_detail_view(
            ListDetailData(name=selected.name, tasks=selected.tasks),
            self.toggle_task,
        )
        self._renderer.render(self._regions[SIDEBAR_REGION], sidebar)
        self._renderer.render(self._regions[DETAIL_REGION], detail)

    def _sidebar_items(self) -> List[SidebarItem]:
        return [
            SidebarItem(
                uid=task_list.uid,
                name=task_list.name,
                todos_count=task_list.pending_count,
                selected=task_list.uid == self.selected_list_uid,
            )
            for task_list in self._repo.all()
        ]

    def _require_loaded(self, action: str) -> ListUid:
        if self.selected_list_uid is None:
            raise InvalidTransitionError(action)
        return self.selected_list_uid


__all__ = ["ControllerState", "DETAIL_REGION", "ListsController", "SIDEBAR_REGION"]
