"""NiceGUI entrypoint for the Infragrowth catalog browser."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Iterable

from nicegui import run, ui

from infralib.domain.items import ActionKind, Category, SortOrder
from infralib.usecases.dispatch_action import Notice
from infralib.utils.logging import configure_root
from infralib.viewmodels.catalog_format import (
    EMPTY_SUBTITLE,
    EMPTY_TITLE,
    PAGE_TITLE,
    RETRY_LABEL,
    category_label,
    sort_label,
)
from infralib.viewmodels.catalog_vm import CatalogViewState
from infralib.viewmodels.settings_vm import SettingsVM
from infralib.web_ui.browser_ports import BrowserClipboard, BrowserLink, BrowserSave
from infralib.web_ui.runtime import WebRuntime, select_save_port

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the catalog pages."""
    ui.add_head_html(
        """
<style>
:root {
  --lib-accent: #7c3aed;
  --lib-muted: #4b5563;
}
body { background: #f9fafb; }
.lib-page { max-width: 1280px; margin: 0 auto; padding: 16px; }
.lib-card { border-radius: 10px; overflow: hidden; transition: transform 150ms ease-out; }
.lib-card:hover { transform: scale(1.02); }
.lib-thumb { aspect-ratio: 16 / 9; cursor: pointer; }
.lib-muted { color: var(--lib-muted); }
</style>
        """,
        shared=True,
    )


def _notify(notices: Iterable[Notice]) -> None:
    """Render dispatcher notices as NiceGUI toasts."""
    for notice in notices:
        ui.notify(notice.message, type=notice.level, close_button="OK" if notice.is_error else False)


def _build_ui(settings_vm: SettingsVM) -> None:
    """Register the NiceGUI pages."""

    @ui.page("/")
    async def index() -> None:
        runtime = WebRuntime(
            settings_vm,
            clipboard=BrowserClipboard(),
            save_port=select_save_port(settings_vm, BrowserSave()),
            link_port=BrowserLink(),
            io_bound=run.io_bound,
        )

        async def on_category(category: Category) -> None:
            await runtime.select_category(category)

        async def on_toggle_sort() -> None:
            await runtime.toggle_sort()

        async def on_action(kind: ActionKind) -> None:
            _notify(await runtime.run_action(kind))

        async def on_file(index: int) -> None:
            _notify(await runtime.run_action(ActionKind.DOWNLOAD_ARCHIVE_FILE, file_index=index))

        async def on_all_files() -> None:
            item = runtime.selection_vm.open_item
            if item is not None:
                _notify(await runtime.dispatcher.download_archive_files(item))

        @ui.refreshable
        def render_header() -> None:
            with ui.column().classes("w-full bg-white shadow-sm q-pa-md"):
                with ui.row().classes("w-full justify-between items-center"):
                    ui.label(PAGE_TITLE).classes("text-h4 text-weight-bold")
                    icon = "arrow_upward" if runtime.catalog_vm.sort_order is SortOrder.ASC else "arrow_downward"
                    ui.button(sort_label(runtime.catalog_vm.sort_order), icon=icon, on_click=on_toggle_sort, color="purple")
                with ui.row().classes("w-full justify-center q-gutter-md"):
                    for category in Category:
                        active = category is runtime.catalog_vm.category
                        ui.button(
                            category_label(category),
                            color="purple" if active else "grey-4",
                            on_click=lambda _, c=category: on_category(c),
                        ).props("unelevated" if active else "flat")

        @ui.refreshable
        def render_content() -> None:
            state = runtime.catalog_vm.view_state
            if state in (CatalogViewState.LOADING, CatalogViewState.IDLE):
                with ui.row().classes("w-full justify-center q-pa-xl"):
                    ui.spinner(size="xl", color="purple")
                return
            if state is CatalogViewState.FAILED:
                error = runtime.catalog_vm.error
                with ui.card().classes("q-pa-lg self-center items-center"):
                    ui.label(error.message if error else "").classes("text-negative q-mb-md")
                    ui.button(RETRY_LABEL, on_click=lambda: ui.navigate.reload(), color="purple")
                return
            if state is CatalogViewState.EMPTY:
                with ui.column().classes("w-full items-center q-pa-xl"):
                    ui.label(EMPTY_TITLE).classes("text-h5 lib-muted")
                    ui.label(EMPTY_SUBTITLE).classes("lib-muted q-mt-sm")
                return
            with ui.grid(columns=3).classes("w-full q-gutter-md"):
                for card, item in runtime.cards():
                    with ui.card().tight().classes("lib-card"):
                        ui.image(card.image_src).classes("lib-thumb").on(
                            "click", lambda _, url=card.image_src: runtime.enlarge_image(url)
                        )
                        with ui.card_section().classes("column justify-between").style("min-height: 220px"):
                            ui.label(card.title).classes("text-h6")
                            ui.label(card.description).classes("lib-muted q-mb-md").tooltip(card.tooltip)
                            if card.opens_link:
                                ui.button(
                                    card.primary_label,
                                    color="purple",
                                    on_click=lambda _, i=item: _notify(runtime.run_card_link(i)),
                                ).classes("w-full q-mb-sm")
                            else:
                                ui.button(
                                    card.primary_label,
                                    color="purple",
                                    on_click=lambda _, i=item: runtime.open_detail(i),
                                ).classes("w-full q-mb-sm")
                            tutorial = ui.button(card.tutorial_label, icon="play_arrow", color="grey-3").classes(
                                "w-full text-grey-9"
                            )
                            if card.tutorial_href:
                                tutorial.on_click(lambda _, href=card.tutorial_href: ui.navigate.to(href, new_tab=True))
                            else:
                                tutorial.disable()

        detail_dialog = ui.dialog().on("hide", lambda _: runtime.close_detail())
        image_dialog = ui.dialog().on("hide", lambda _: runtime.dismiss_image())

        @ui.refreshable
        def render_detail() -> None:
            panel = runtime.detail_panel()
            if panel is None:
                return
            with ui.card().classes("q-pa-md").style("min-width: 560px"):
                with ui.row().classes("w-full justify-between items-center q-mb-md"):
                    ui.label(panel.title).classes("text-h5 text-weight-bold")
                    ui.button(icon="close", on_click=runtime.close_detail).props("flat round")
                if panel.lists_files:
                    ui.label("Archivos Disponibles:").classes("text-h6 q-mb-sm")
                    for row in panel.files:
                        with ui.row().classes("w-full items-center justify-between bg-grey-2 q-pa-sm rounded-borders"):
                            ui.label(row.label).classes("col")
                            ui.button(
                                "Descargar",
                                icon="download",
                                color="purple",
                                on_click=lambda _, i=row.index: on_file(i),
                            )
                    if len(panel.files) > 1:
                        ui.button("Descargar todos", icon="download", on_click=on_all_files).props("outline")
                with ui.row().classes("w-full q-gutter-sm"):
                    for action in panel.actions:
                        ui.button(
                            action.label,
                            icon=action.icon,
                            color="purple" if action.kind is ActionKind.DOWNLOAD_PAYLOAD else "grey-3",
                            on_click=lambda _, k=action.kind: on_action(k),
                        ).classes("col")

        @ui.refreshable
        def render_image() -> None:
            url = runtime.selection_vm.enlarged_image_url
            if not url:
                return
            ui.image(url).classes("cursor-pointer").style("min-width: 60vw; max-height: 90vh").on(
                "click", lambda _: runtime.dismiss_image()
            )

        with detail_dialog:
            render_detail()
        with image_dialog:
            render_image()

        def sync_overlays() -> None:
            render_detail.refresh()
            render_image.refresh()
            detail_dialog.value = runtime.selection_vm.detail_open
            image_dialog.value = runtime.selection_vm.image_open

        def sync_catalog() -> None:
            render_header.refresh()
            render_content.refresh()

        runtime.selection_vm.on_changed = lambda _vm: sync_overlays()
        runtime.catalog_vm.on_changed = lambda _vm: sync_catalog()

        with ui.column().classes("w-full q-pa-none"):
            render_header()
            with ui.column().classes("lib-page w-full"):
                render_content()

        ui.timer(0.1, runtime.load, once=True)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the Infragrowth catalog browser.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--endpoint", default=None, help="Catalog webhook URL (overrides INFRALIB_ENDPOINT_URL).")
    parser.add_argument("--save-dir", default=None, help="Save downloads into this directory (overrides INFRALIB_SAVE_DIR).")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    settings_vm = SettingsVM.from_env()
    if args.endpoint:
        settings_vm.endpoint_url = args.endpoint
    if args.save_dir:
        settings_vm.save_dir = args.save_dir
    configure_root(settings_vm.debug_logging)
    if args.smoke_test:
        payload = settings_vm.to_dict()
        print("web-smoke-ok", payload["endpoint_url"], payload["default_category"])
        return
    _install_theme()
    _build_ui(settings_vm)
    LOGGER.info("Serving catalog from %s", settings_vm.endpoint_url)
    ui.run(
        host=args.host,
        port=args.port,
        title=PAGE_TITLE,
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("INFRALIB_WEB_STORAGE_SECRET", "infralib-web-ui-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
