"""Per-page orchestration state for the NiceGUI catalog browser.

This module composes viewmodels, the sync coordinator and the action
dispatcher. It has no NiceGUI imports; the entrypoint injects the browser
ports and ``run.io_bound`` so the runtime can be driven from tests.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, List, Optional, Tuple

from infralib.adapters.save_local import LocalSaveAdapter
from infralib.app.controller import AppController
from infralib.domain.items import ActionKind, CatalogItem, Category
from infralib.domain.ports import ACTION_UNAVAILABLE, ClipboardPort, LinkPort, SavePort
from infralib.usecases.catalog_sync import CatalogSyncCoordinator
from infralib.usecases.dispatch_action import ActionDispatcher, Notice
from infralib.viewmodels.catalog_vm import CatalogVM
from infralib.viewmodels.selection_vm import SelectionVM
from infralib.viewmodels.settings_vm import SettingsVM
from infralib.web_ui.viewmodels import CatalogCard, DetailPanel, build_cards, build_detail_panel

LOGGER = logging.getLogger(__name__)

IoBound = Callable[..., Awaitable[Any]]


def select_save_port(settings_vm: SettingsVM, browser_save: SavePort) -> SavePort:
    """Save into ``save_dir`` on this machine when configured, else via the browser."""
    if settings_vm.save_dir:
        LOGGER.info("Downloads are saved to %s", settings_vm.save_dir)
        return LocalSaveAdapter(settings_vm.save_dir)
    return browser_save


class WebRuntime:
    """Orchestration state used by NiceGUI views."""

    def __init__(
        self,
        settings_vm: SettingsVM,
        *,
        clipboard: ClipboardPort,
        save_port: SavePort,
        link_port: LinkPort,
        io_bound: Optional[IoBound] = None,
        controller: Optional[AppController] = None,
    ) -> None:
        self.settings_vm = settings_vm
        self.controller = controller or AppController(settings_vm)
        if not self.controller.ensure_ready():
            raise RuntimeError("Catalog endpoint URL is not configured.")

        self.catalog_vm = CatalogVM(
            category=settings_vm.default_category,
            sort_order=settings_vm.default_sort,
        )
        self.selection_vm = SelectionVM()
        self.sync = CatalogSyncCoordinator(
            self.catalog_vm,
            self.selection_vm,
            self.controller.uc_fetch,
            io_bound=io_bound,
        )
        self.dispatcher = ActionDispatcher(
            clipboard=clipboard,
            save_port=save_port,
            link_port=link_port,
            file_port=self.controller.file_adapter,
            io_bound=io_bound,
        )

    # ---- Projections ----
    def cards(self) -> List[Tuple[CatalogCard, CatalogItem]]:
        items = self.catalog_vm.items
        return list(zip(build_cards(items), items))

    def detail_panel(self) -> Optional[DetailPanel]:
        item = self.selection_vm.open_item
        return build_detail_panel(item) if item is not None else None

    # ---- Catalog commands ----
    async def load(self) -> bool:
        return await self.sync.refresh()

    async def select_category(self, category: Category) -> bool:
        return await self.sync.change_category(category)

    async def toggle_sort(self) -> bool:
        return await self.sync.toggle_sort()

    # ---- Overlay commands ----
    def open_detail(self, item: CatalogItem) -> None:
        self.selection_vm.open_detail(item)

    def close_detail(self) -> None:
        self.selection_vm.close_detail()

    def enlarge_image(self, url: Optional[str]) -> None:
        self.selection_vm.enlarge_image(url)

    def dismiss_image(self) -> None:
        self.selection_vm.dismiss_image()

    # ---- Actions ----
    async def run_action(self, kind: ActionKind, *, file_index: Optional[int] = None) -> List[Notice]:
        """Run an overlay action against the open item."""
        item = self.selection_vm.open_item
        if item is None:
            return [Notice("warning", "No hay ningún elemento seleccionado.", ACTION_UNAVAILABLE)]
        return await self.dispatcher.dispatch(kind, item, file_index=file_index)

    def run_card_link(self, item: CatalogItem) -> List[Notice]:
        """Primary button of a voice-agent card: open the link without the overlay."""
        return [self.dispatcher.open_external_link(item)]


__all__ = ["WebRuntime", "select_save_port"]
