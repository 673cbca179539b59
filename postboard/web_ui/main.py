"""NiceGUI entrypoint for the posts web runtime.

Renders the same list and add/edit screens as the Tk app, bound to the same
view models. A ``ui.timer`` drains the dispatcher on the event loop, so store
state is only mutated there.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from nicegui import ui

from postboard.app.controller import AppController, load_settings_vm
from postboard.app.ui_dispatcher import UiDispatcher
from postboard.domain.entities import Post
from postboard.utils import logging as logging_utils
from postboard.viewmodels.post_form_vm import PostFormVM
from postboard.viewmodels.post_list_vm import PostListVM
from postboard.viewmodels.post_store import PostStoreVM

LOGGER = logging.getLogger(__name__)

DRAIN_INTERVAL_S = 0.1


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --pb-card: rgba(255, 255, 255, 0.92);
  --pb-border: #d5dde8;
  --pb-muted: #5b6778;
}
body { background: #f3f6fa; }
.pb-page { max-width: 720px; margin: 0 auto; padding: 12px; }
.pb-card { background: var(--pb-card); border: 1px solid var(--pb-border); border-radius: 12px; }
.pb-muted { color: var(--pb-muted); }
</style>
        """
    )


def _build_ui(store: PostStoreVM, dispatcher: UiDispatcher) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    def index() -> None:
        list_vm = PostListVM(store)
        seen = {"revision": -1}
        form_dialog = ui.dialog()

        def open_form(post: Optional[Post]) -> None:
            vm = PostFormVM(store, post, on_dismiss=form_dialog.close)
            form_dialog.clear()
            with form_dialog, ui.card().classes("pb-card w-full"):
                ui.label(vm.header).classes("text-h6")
                ui.input("Title", value=vm.title, on_change=lambda e: vm.set_title(e.value or "")).classes("w-full")
                ui.textarea("Body", value=vm.body, on_change=lambda e: vm.set_body(e.value or "")).classes("w-full")
                hint = ui.label("").classes("text-negative text-caption")

                def submit() -> None:
                    if not vm.cmd_submit():
                        hint.text = "Title and body are required."

                with ui.row().classes("w-full justify-end"):
                    ui.button("Cancel", on_click=vm.cmd_cancel).props("flat")
                    ui.button(
                        vm.submit_label,
                        on_click=submit,
                        color="positive" if vm.is_edit else "primary",
                    )
            form_dialog.open()

        list_vm.on_open_create = lambda: open_form(None)
        list_vm.on_open_edit = open_form

        @ui.refreshable
        def render_error() -> None:
            message = list_vm.error_message
            if not message:
                return
            with ui.row().classes("w-full items-center justify-between pb-card q-pa-sm bg-red-1"):
                ui.label(message).classes("text-negative")
                ui.button("Dismiss", on_click=list_vm.cmd_dismiss_error).props("flat dense")

        @ui.refreshable
        def render_list() -> None:
            rows = list_vm.rows()
            if not rows:
                ui.label("No posts loaded.").classes("pb-muted")
                return
            for index, row in enumerate(rows):
                with ui.card().classes("pb-card w-full q-pa-sm"):
                    with ui.row().classes("w-full items-start justify-between no-wrap"):
                        with ui.column().classes("gap-0"):
                            ui.label(row.title).classes("text-subtitle1 text-weight-medium")
                            ui.label(row.body).classes("text-caption pb-muted")
                        with ui.row().classes("no-wrap"):
                            ui.button(
                                icon="edit",
                                on_click=lambda _, i=index: list_vm.cmd_edit_at(i),
                            ).props("flat round dense")
                            ui.button(
                                icon="delete",
                                on_click=lambda _, i=index: list_vm.cmd_delete_at([i]),
                            ).props("flat round dense color=negative")

        with ui.column().classes("pb-page w-full"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label("Posts").classes("text-h5")
                with ui.row():
                    ui.button(icon="refresh", on_click=list_vm.cmd_refresh).props("flat round")
                    ui.button(icon="add", on_click=list_vm.cmd_add).props("round color=primary")
            render_error()
            render_list()

        def tick() -> None:
            dispatcher.drain()
            if store.revision != seen["revision"]:
                seen["revision"] = store.revision
                render_error.refresh()
                render_list.refresh()

        ui.timer(DRAIN_INTERVAL_S, tick)
        list_vm.on_appear()


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the posts NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--offline", action="store_true")
    parser.add_argument("--storage-root", default=None)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root()
    settings_vm = load_settings_vm(
        storage_root=args.storage_root,
        base_url=args.base_url,
        offline=True if args.offline else None,
    )
    logging_utils.apply_preferences(settings_vm.debug_logging)
    if args.smoke_test:
        print("web-smoke-ok", settings_vm.base_url, "offline" if settings_vm.offline else "online")
        return
    dispatcher = UiDispatcher()
    store = AppController(settings_vm).build_store(dispatcher)
    _install_theme()
    _build_ui(store, dispatcher)
    ui.run(
        host=args.host,
        port=args.port,
        title="Posts",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
