from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from tasklists.domain.ports import RegionName, RenderPort, RootPort
from tasklists.viewmodels.descriptions import ViewDescription, describe_as_text


@dataclass
class MemoryRegion:
    """Named render target holding whatever was rendered into it last."""

    name: str
    description: Optional[ViewDescription] = None
    render_count: int = 0

    @property
    def text(self) -> str:
        if self.description is None:
            return ""
        return describe_as_text(self.description)


@dataclass
class MemoryRoot(RootPort):
    """Headless attachment point used for tests and smoke runs."""

    root_id: str = "app"
    header: str = ""
    regions: Dict[RegionName, MemoryRegion] = field(default_factory=dict)
    mount_count: int = 0

    def mount_regions(
        self, header: str, names: Sequence[RegionName]
    ) -> Dict[RegionName, MemoryRegion]:
        self.header = header
        self.regions = {name: MemoryRegion(name=name) for name in names}
        self.mount_count += 1
        return dict(self.regions)

    def region(self, name: RegionName) -> MemoryRegion:
        return self.regions[name]


@dataclass
class MemoryRenderer(RenderPort):
    """Render capability that records descriptions instead of drawing them."""

    calls: List[Tuple[str, ViewDescription]] = field(default_factory=list)

    def render(self, target: MemoryRegion, description: ViewDescription) -> None:
        target.description = description
        target.render_count += 1
        self.calls.append((target.name, description))
