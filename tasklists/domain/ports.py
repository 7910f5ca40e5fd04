from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Protocol, Sequence, Union

from .entities import TaskList

if TYPE_CHECKING:  # pragma: no cover - type checking helper
    from tasklists.viewmodels.descriptions import (
        ListDetailDescription,
        SidebarDescription,
    )

ListUid = str
TaskUid = str
RegionName = str

# Opaque handle to a render target (a Tk frame, a NiceGUI element, ...).
RenderTarget = Any


# ---- Ports (Hexagonal boundaries) ----
class RootPort(Protocol):
    """Externally provided attachment point located by a well-known identifier."""

    root_id: str

    def mount_regions(
        self, header: str, names: Sequence[RegionName]
    ) -> Dict[RegionName, RenderTarget]: ...  # clears the root first


class RenderPort(Protocol):
    """Reconcile a view description against whatever the target shows now.

    Must accept repeated calls against the same target, replacing prior
    content each time.
    """

    def render(
        self,
        target: RenderTarget,
        description: Union["SidebarDescription", "ListDetailDescription"],
    ) -> None: ...


class SeedPort(Protocol):
    """Source of the initial task lists."""

    def load_lists(self) -> List[TaskList]: ...
