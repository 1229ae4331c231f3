"""Coordinator keeping catalog fetches, parameters and selection consistent."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

from infralib.domain.items import CatalogItem, Category, SortOrder
from infralib.domain.ports import UNREACHABLE, UseCaseError
from infralib.viewmodels.catalog_vm import CatalogVM, FetchTicket
from infralib.viewmodels.selection_vm import SelectionVM

LOGGER = logging.getLogger(__name__)

IoBound = Callable[..., Awaitable[Any]]
FetchFn = Callable[[Category, SortOrder], List[CatalogItem]]


class CatalogSyncCoordinator:
    """Runs fetch cycles for the current (category, sort order) pair.

    Every fetch captures a ticket from :class:`CatalogVM` before suspending;
    on completion the view-model applies the result only if that ticket is
    still the latest. Parameter changes clear the selection before the new
    cycle starts so no overlay keeps pointing at a replaced item list.
    """

    def __init__(
        self,
        catalog_vm: CatalogVM,
        selection_vm: SelectionVM,
        uc_fetch: FetchFn,
        *,
        io_bound: Optional[IoBound] = None,
    ) -> None:
        self.catalog_vm = catalog_vm
        self.selection_vm = selection_vm
        self.uc_fetch = uc_fetch
        self._io_bound: IoBound = io_bound or asyncio.to_thread

    async def refresh(self) -> bool:
        """Fetch the current parameters; returns whether the result was applied."""
        ticket = self.catalog_vm.begin_fetch()
        self.selection_vm.close_detail()
        return await self._run(ticket)

    async def change_category(self, category: Category) -> bool:
        if not self.catalog_vm.set_category(category):
            return False
        self.selection_vm.clear()
        return await self.refresh()

    async def set_sort_order(self, sort_order: SortOrder) -> bool:
        if not self.catalog_vm.set_sort_order(sort_order):
            return False
        return await self.refresh()

    async def toggle_sort(self) -> bool:
        return await self.set_sort_order(self.catalog_vm.sort_order.toggled())

    async def _run(self, ticket: FetchTicket) -> bool:
        try:
            items = await self._io_bound(self.uc_fetch, ticket.category, ticket.sort_order)
        except UseCaseError as exc:
            return self.catalog_vm.fail(ticket, exc)
        except Exception as exc:
            LOGGER.exception("Unexpected failure in fetch #%d", ticket.generation)
            return self.catalog_vm.fail(ticket, UseCaseError(UNREACHABLE, str(exc) or "Error inesperado."))
        return self.catalog_vm.complete(ticket, items)


__all__ = ["CatalogSyncCoordinator"]
