from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from postboard.viewmodels.post_form_vm import PostFormVM


class PostFormDialog(tk.Toplevel):
    """Modal add/edit dialog bound to a ``PostFormVM`` (UI-only)."""

    def __init__(self, parent: tk.Widget, vm: PostFormVM) -> None:
        super().__init__(parent)
        self.vm = vm
        self.title(vm.header)
        self.transient(parent)
        self.resizable(True, False)
        self.protocol("WM_DELETE_WINDOW", self.vm.cmd_cancel)

        self.title_var = tk.StringVar(value=vm.title)
        self.body_var = tk.StringVar(value=vm.body)
        self.title_var.trace_add("write", lambda *_: vm.set_title(self.title_var.get()))
        self.body_var.trace_add("write", lambda *_: vm.set_body(self.body_var.get()))
        self.hint_var = tk.StringVar(value="")

        self._build_ui()

        self.update_idletasks()
        self.geometry(self._center_over_parent(parent))
        self.grab_set()
        self.focus_set()

    def _build_ui(self) -> None:
        pad = dict(padx=8, pady=6)
        form = ttk.Labelframe(self, text=self.vm.header)
        form.grid(row=0, column=0, sticky="ew", **pad)
        form.columnconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        ttk.Label(form, text="Title").grid(row=0, column=0, sticky="w")
        title_entry = ttk.Entry(form, textvariable=self.title_var, width=48)
        title_entry.grid(row=0, column=1, sticky="ew", pady=(0, 6))
        ttk.Label(form, text="Body").grid(row=1, column=0, sticky="w")
        ttk.Entry(form, textvariable=self.body_var, width=48).grid(row=1, column=1, sticky="ew")
        ttk.Label(form, textvariable=self.hint_var, foreground="#b42318").grid(
            row=2, column=0, columnspan=2, sticky="w", pady=(6, 0)
        )

        buttons = ttk.Frame(self)
        buttons.grid(row=1, column=0, sticky="e", **pad)
        ttk.Button(buttons, text="Cancel", command=self.vm.cmd_cancel).pack(side=tk.RIGHT)
        ttk.Button(buttons, text=self.vm.submit_label, command=self._on_submit).pack(
            side=tk.RIGHT, padx=(0, 6)
        )

        self.bind("<Return>", lambda e: self._on_submit())
        self.bind("<Escape>", lambda e: self.vm.cmd_cancel())
        title_entry.focus_set()

    def _on_submit(self) -> None:
        if not self.vm.cmd_submit():
            self.hint_var.set("Title and body are required.")

    def _center_over_parent(self, parent: tk.Widget) -> str:
        width = self.winfo_reqwidth()
        height = self.winfo_reqheight()
        x = parent.winfo_rootx() + max(0, (parent.winfo_width() - width) // 2)
        y = parent.winfo_rooty() + max(0, (parent.winfo_height() - height) // 3)
        return f"+{x}+{y}"
