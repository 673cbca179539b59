# postboard/app/main.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional, Sequence

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.post_form_dialog import PostFormDialog
from .views.post_list_view import PostListView

# ---- ViewModels ----
from ..viewmodels.post_form_vm import PostFormVM
from ..viewmodels.post_list_vm import PostListVM
from ..viewmodels.settings_vm import SettingsVM

# ---- Wiring ----
from ..domain.entities import Post
from .controller import AppController, load_settings_vm
from .ui_dispatcher import UiDispatcher
from ..utils import logging as logging_utils

LOGGER = logging.getLogger(__name__)


class App:
    """Bootstrap: wire Views <-> ViewModels, the post store, and the dispatcher."""

    def __init__(self, settings_vm: SettingsVM) -> None:
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm

        self.win = MainWindowView(
            on_add=self._on_add,
            on_delete=self._on_delete_selected,
            on_refresh=self._on_refresh,
            on_dismiss_error=self._on_dismiss_error,
            on_close=self._on_close,
        )

        # ---- Store & dispatcher ----
        self.dispatcher = UiDispatcher()
        self.controller = AppController(settings_vm)
        self.store = self.controller.build_store(self.dispatcher)

        # ---- ViewModels ----
        self.list_vm = PostListVM(
            self.store,
            on_open_create=lambda: self._open_form(None),
            on_open_edit=self._open_form,
        )
        self._form_dialog: Optional[PostFormDialog] = None

        # ---- Subviews ----
        self.list_view = PostListView(self.win.list_host)
        self.list_view.on_edit = self.list_vm.cmd_edit_at
        self.list_view.on_delete_rows = self.list_vm.cmd_delete_at
        self.win.mount_list(self.list_view)

        self.store.subscribe(self._render)
        self.dispatcher.pump(self.win.after, self.win.after_cancel)
        self.win.set_status_message("Loading posts…")
        self.list_vm.on_appear()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render(self) -> None:
        rows = self.list_vm.rows()
        self.list_view.set_rows(rows)
        error = self.list_vm.error_message
        if error:
            self.win.show_error(error)
        else:
            self.win.show_error(None)
            self.win.set_status_message(f"{len(rows)} posts")

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def _on_add(self) -> None:
        self.list_vm.cmd_add()

    def _on_delete_selected(self) -> None:
        self.list_view.delete_selected()

    def _on_refresh(self) -> None:
        self.win.set_status_message("Refreshing…")
        self.list_vm.cmd_refresh()

    def _on_dismiss_error(self) -> None:
        self.list_vm.cmd_dismiss_error()

    def _open_form(self, post: Optional[Post]) -> None:
        if self._form_dialog is not None:
            self._form_dialog.lift()
            return
        vm = PostFormVM(self.store, post)
        dialog = PostFormDialog(self.win, vm)
        self._form_dialog = dialog

        def _dismiss() -> None:
            self._form_dialog = None
            dialog.grab_release()
            dialog.destroy()

        vm.on_dismiss = _dismiss

    def _on_close(self) -> None:
        self._log.debug("Shutting down (%d requests in flight)", self.dispatcher.pending_count)
        self.dispatcher.shutdown(wait=False)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and edit posts from a jsonplaceholder-style API.")
    parser.add_argument("--base-url", default=None, help="API root, e.g. https://jsonplaceholder.typicode.com")
    parser.add_argument("--offline", action="store_true", help="Use in-memory posts instead of HTTP")
    parser.add_argument("--storage-root", default=None, help="Directory holding user_settings.json")
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging_utils.configure_root(args.log_level or logging.INFO)
    settings_vm = load_settings_vm(
        storage_root=args.storage_root,
        base_url=args.base_url,
        offline=True if args.offline else None,
    )
    if not args.log_level:
        logging_utils.apply_preferences(settings_vm.debug_logging)
    app = App(settings_vm)
    app.win.mainloop()


if __name__ == "__main__":
    main()
