"""
MainWindowView
---------------
Tkinter top-level window for the task-list desktop runtime. This file holds
**only View code**: it owns the root attachment frame (named after the root
id, ``"app"`` by default) and knows how to mount named regions inside it.
Which regions exist and what they show is decided by the controller.
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Dict, Sequence

from .theme import HEADER_FONT, PAD


class TkRoot:
    """Root attachment point backed by a ``ttk.Frame``."""

    def __init__(self, frame: ttk.Frame, root_id: str) -> None:
        self.frame = frame
        self.root_id = root_id

    def mount_regions(self, header: str, names: Sequence[str]) -> Dict[str, ttk.Frame]:
        """Clear the root frame, add the header, then one column per region."""
        for child in list(self.frame.winfo_children()):
            child.destroy()

        self.frame.rowconfigure(1, weight=1)
        ttk.Label(self.frame, text=header, font=HEADER_FONT).grid(
            row=0, column=0, columnspan=max(len(names), 1), sticky="w", padx=PAD, pady=(PAD, 4)
        )

        regions: Dict[str, ttk.Frame] = {}
        for col, name in enumerate(names):
            # the first region is the narrow sidebar, the rest share the width
            self.frame.columnconfigure(col, weight=0 if col == 0 else 1)
            region = ttk.Frame(self.frame, name=name)
            region.grid(row=1, column=col, sticky="nsew", padx=PAD, pady=(4, PAD))
            regions[name] = region
        return regions


class MainWindowView(tk.Tk):
    """Top-level application window.

    Exceptions escaping widget callbacks are logged here; this is the
    outermost boundary of the desktop runtime.
    """

    def __init__(self, *, title: str = "Tasks", root_id: str = "app") -> None:
        super().__init__()
        self._log = logging.getLogger(__name__)

        # ---- Window basics ----
        self.title(title)
        self.geometry("720x480")
        self.minsize(480, 320)
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        frame = ttk.Frame(self, name=root_id)
        frame.grid(row=0, column=0, sticky="nsew")
        self.root = TkRoot(frame, root_id)

    def report_callback_exception(self, exc, val, tb) -> None:  # type: ignore[override]
        self._log.error("Unhandled error in UI callback", exc_info=(exc, val, tb))
