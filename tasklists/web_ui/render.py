"""NiceGUI root attachment and render capability for the web runtime.

Both classes only translate view descriptions into NiceGUI elements; all
state changes go through the callbacks carried by the descriptions.
"""

from __future__ import annotations

from typing import Dict, Sequence

from nicegui import ui

from tasklists.viewmodels.descriptions import (
    ListDetailDescription,
    SidebarDescription,
    ViewDescription,
)


class NiceGuiRoot:
    """Attachment point: a container element carrying ``id=<root_id>``."""

    def __init__(self, element: ui.element, root_id: str) -> None:
        self.element = element
        self.root_id = root_id

    @classmethod
    def create(cls, root_id: str = "app") -> "NiceGuiRoot":
        element = ui.element("div").props(f"id={root_id}").classes("tl-root w-full")
        return cls(element, root_id)

    def mount_regions(self, header: str, names: Sequence[str]) -> Dict[str, ui.element]:
        """Clear the root, add the header, then a row holding one element per region."""
        self.element.clear()
        regions: Dict[str, ui.element] = {}
        with self.element:
            ui.label(header).classes("text-h5 q-mb-sm")
            with ui.row().classes("w-full no-wrap items-start q-gutter-md"):
                for index, name in enumerate(names):
                    width = "tl-aside" if index == 0 else "tl-main col"
                    regions[name] = ui.element("div").props(f"id={name}").classes(
                        f"tl-card q-pa-md {width}"
                    )
        return regions


class NiceGuiRenderer:
    """Replace a target element's children with elements built from a description."""

    def render(self, target: ui.element, description: ViewDescription) -> None:
        target.clear()
        with target:
            if isinstance(description, SidebarDescription):
                self._render_sidebar(description)
            elif isinstance(description, ListDetailDescription):
                self._render_detail(description)
            else:
                raise TypeError(f"Unsupported description: {type(description).__name__}")

    @staticmethod
    def _render_sidebar(description: SidebarDescription) -> None:
        ui.label(description.heading).classes("text-caption text-grey-7")
        with ui.column().classes("w-full q-gutter-xs"):
            for row in description.rows:
                with ui.row().classes("w-full items-center justify-between no-wrap"):
                    ui.button(row.label, on_click=row.on_click).props(
                        "flat dense no-caps align=left"
                    ).classes("text-weight-bold" if row.selected else "")
                    ui.label(row.count_text).classes("tl-count")

    @staticmethod
    def _render_detail(description: ListDetailDescription) -> None:
        ui.label(description.heading).classes("text-h6")
        if description.empty_message is not None:
            ui.label(description.empty_message).classes("text-italic text-grey-7")
            return
        for row in description.rows:
            with ui.row().classes("items-center q-gutter-sm"):
                ui.button(row.toggle_label, on_click=row.on_toggle).props(
                    "dense outline" if row.done else "dense"
                )
                ui.label(row.name).classes("text-grey-6" if row.done else "")


__all__ = ["NiceGuiRenderer", "NiceGuiRoot"]
