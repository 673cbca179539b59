"""
MainWindowView
---------------
Tkinter main window for the posts browser. This file contains **only View
code**: no HTTP, no store logic. It exposes callback hooks that are connected
to view models by ``postboard/app/main.py``.

Layout:
  * Toolbar with Add / Delete / Refresh
  * Host frame for the PostListView (mounted later)
  * Status bar with the last error message and a Dismiss button
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    """Top-level application window (UI-only)."""

    # ---- Callback type aliases (callables injected from ViewModels) ----
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        on_add: OnVoid = None,
        on_delete: OnVoid = None,
        on_refresh: OnVoid = None,
        on_dismiss_error: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("Posts")
        self.geometry("760x560")
        self.minsize(480, 360)

        self._on_add = on_add
        self._on_delete = on_delete
        self._on_refresh = on_refresh
        self._on_dismiss_error = on_dismiss_error
        self._on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)

        # ---- 3 rows: Toolbar, List, Status ----
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar(self)
        self._build_main_area(self)
        self._build_statusbar(self)

        self.bind("<Control-n>", lambda e: self._on_add and self._on_add())
        self.bind("<F5>", lambda e: self._on_refresh and self._on_refresh())

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))

        ttk.Label(toolbar, text="Posts", font=("TkDefaultFont", 14, "bold")).pack(side=tk.LEFT)
        ttk.Button(toolbar, text="Refresh", command=self._on_refresh).pack(side=tk.RIGHT)
        ttk.Button(toolbar, text="Delete", command=self._on_delete).pack(side=tk.RIGHT, padx=6)
        ttk.Button(toolbar, text="+ Add", command=self._on_add).pack(side=tk.RIGHT)

    # ------------------------------------------------------------------
    # Main Area
    # ------------------------------------------------------------------
    def _build_main_area(self, parent: tk.Widget) -> None:
        self.list_host = ttk.Frame(parent)
        self.list_host.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var).grid(row=0, column=0, sticky="w")
        self._btn_dismiss = ttk.Button(status, text="Dismiss", command=self._on_dismiss_error)
        self._btn_dismiss.grid(row=0, column=1, sticky="e")
        self._btn_dismiss.grid_remove()

    # ------------------------------------------------------------------
    # Public API (called by the app layer)
    # ------------------------------------------------------------------
    def set_status_message(self, text: str) -> None:
        self.status_message_var.set(text)

    def show_error(self, message: Optional[str]) -> None:
        """Show ``message`` with a Dismiss button, or hide both when ``None``."""
        if message:
            self.status_message_var.set(f"Error: {message}")
            self._btn_dismiss.grid()
        else:
            self._btn_dismiss.grid_remove()

    def mount_list(self, view: tk.Widget) -> None:
        view.pack(fill="both", expand=True)

    def _on_close_clicked(self) -> None:
        if self._on_close:
            self._on_close()
        self.destroy()
