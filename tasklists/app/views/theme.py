"""Shared visual theme for the task-list desktop views.

The module centralizes ttk style names so the renderer only refers to styles
by name and never carries colors itself.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

PAD = 8
HEADER_FONT = ("TkDefaultFont", 14, "bold")


def apply_theme(root: tk.Misc) -> None:
    """Apply the ttk styles used by :class:`TkRenderer`.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    bg = "#f3f5f9"
    card_bg = "#ffffff"
    border = "#d9dfeb"
    primary = "#2457ff"
    text = "#1f2937"
    muted = "#64748b"

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=bg)

    style.configure(".", background=bg, foreground=text)
    style.configure("TFrame", background=bg)
    style.configure("TLabel", background=bg, foreground=text)
    style.configure("Title.TLabel", background=bg, foreground=text, font=("TkDefaultFont", 12, "bold"))
    style.configure("Subtle.TLabel", background=bg, foreground=muted)
    style.configure("Empty.TLabel", background=bg, foreground=muted, font=("TkDefaultFont", 10, "italic"))
    style.configure("Count.TLabel", background=bg, foreground=primary)

    style.configure("List.TButton", padding=(8, 4), anchor="w", background=bg, relief="flat")
    style.map("List.TButton", background=[("active", "#edf2ff")])
    style.configure(
        "Selected.List.TButton",
        padding=(8, 4),
        anchor="w",
        background=card_bg,
        bordercolor=border,
        font=("TkDefaultFont", 10, "bold"),
    )
    style.configure("Toggle.TButton", padding=(6, 2), width=3, background=card_bg, bordercolor=border)
    style.configure("Done.Toggle.TButton", foreground=muted)
