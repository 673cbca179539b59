"""Posts list view.

Renders ``PostRow`` objects in a Treeview and emits edit/delete callbacks to
the app layer by row position. Double-click (or Return) edits a row; the
Delete key removes the selected rows.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional, Sequence


class PostListView(ttk.Frame):
    """Two-column table (title, body).

    Item ids are generated by Tk, not taken from post ids: the collection may
    hold several posts with the same id.
    """

    def __init__(self, parent, **kwargs):
        super().__init__(parent, **kwargs)

        self.tree = ttk.Treeview(
            self,
            columns=("title", "body"),
            show="headings",
            selectmode="extended",
        )
        self.tree.heading("title", text="Title")
        self.tree.heading("body", text="Body")
        self.tree.column("title", width=240, anchor=tk.W, stretch=False)
        self.tree.column("body", width=460, anchor=tk.W, stretch=True)

        vsb = ttk.Scrollbar(self, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)

        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)

        self.on_edit: Optional[Callable[[int], None]] = None
        self.on_delete_rows: Optional[Callable[[List[int]], None]] = None

        self.tree.bind("<Double-1>", self._on_activate)
        self.tree.bind("<Return>", self._on_activate)
        self.tree.bind("<Delete>", lambda e: self.delete_selected())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_rows(self, rows: Sequence) -> None:
        """Replace table rows; the selection is cleared."""
        self.tree.delete(*self.tree.get_children())
        for row in rows:
            self.tree.insert("", tk.END, values=(row.title, self._one_line(row.body)))

    def selected_indexes(self) -> List[int]:
        """Return row positions of the current selection."""
        children = list(self.tree.get_children(""))
        return sorted(children.index(iid) for iid in self.tree.selection() if iid in children)

    def delete_selected(self) -> None:
        indexes = self.selected_indexes()
        if indexes and self.on_delete_rows:
            self.on_delete_rows(indexes)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_activate(self, _event=None) -> None:
        iid = self.tree.focus()
        children = list(self.tree.get_children(""))
        if iid in children and self.on_edit:
            self.on_edit(children.index(iid))

    @staticmethod
    def _one_line(text: str) -> str:
        return " ".join(str(text).split())
