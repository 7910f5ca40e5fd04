"""
TkRenderer
----------
Render capability for the desktop runtime. It takes an immutable view
description and rebuilds the content of a target frame from it; it never
reads or changes task data and only forwards clicks to the callbacks carried
by the description rows.
"""
from __future__ import annotations

from tkinter import ttk

from ...viewmodels.descriptions import (
    ListDetailDescription,
    SidebarDescription,
    ViewDescription,
)
from .theme import PAD


class TkRenderer:
    """Replace a frame's children with widgets built from a description."""

    def render(self, target: ttk.Frame, description: ViewDescription) -> None:
        for child in list(target.winfo_children()):
            child.destroy()
        if isinstance(description, SidebarDescription):
            self._render_sidebar(target, description)
        elif isinstance(description, ListDetailDescription):
            self._render_detail(target, description)
        else:
            raise TypeError(f"Unsupported description: {type(description).__name__}")

    # ------------------------------------------------------------------
    def _render_sidebar(self, target: ttk.Frame, description: SidebarDescription) -> None:
        ttk.Label(target, text=description.heading, style="Subtle.TLabel").grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, 4)
        )
        target.columnconfigure(0, weight=1)
        for index, row in enumerate(description.rows, start=1):
            style = "Selected.List.TButton" if row.selected else "List.TButton"
            ttk.Button(target, text=row.label, style=style, command=row.on_click).grid(
                row=index, column=0, sticky="ew"
            )
            ttk.Label(target, text=row.count_text, style="Count.TLabel").grid(
                row=index, column=1, sticky="e", padx=(PAD, 0)
            )

    def _render_detail(self, target: ttk.Frame, description: ListDetailDescription) -> None:
        ttk.Label(target, text=description.heading, style="Title.TLabel").grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, PAD)
        )
        target.columnconfigure(1, weight=1)
        if description.empty_message is not None:
            ttk.Label(target, text=description.empty_message, style="Empty.TLabel").grid(
                row=1, column=0, columnspan=2, sticky="w"
            )
            return
        for index, row in enumerate(description.rows, start=1):
            style = "Done.Toggle.TButton" if row.done else "Toggle.TButton"
            ttk.Button(target, text=row.toggle_label, style=style, command=row.on_toggle).grid(
                row=index, column=0, sticky="w", pady=2
            )
            ttk.Label(target, text=row.name).grid(
                row=index, column=1, sticky="w", padx=(PAD, 0)
            )

