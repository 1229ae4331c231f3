"""Catalog state holder for the browser views.

Call context:
    ``CatalogSyncCoordinator`` is the only writer; views read ``view_state``,
    ``items``, ``category`` and ``sort_order`` when rendering.

Fetch results are tagged with the generation captured when the request was
initiated. ``complete``/``fail`` drop any result whose generation is no longer
current, so a slow response can never overwrite a newer one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple

from infralib.domain.items import CatalogItem, Category, SortOrder
from infralib.domain.ports import UseCaseError

LOGGER = logging.getLogger(__name__)


class FetchPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class CatalogViewState(str, Enum):
    """What the content area should render."""

    IDLE = "idle"
    LOADING = "loading"
    FAILED = "failed"
    EMPTY = "empty"
    READY = "ready"


@dataclass(frozen=True)
class FetchTicket:
    """Parameters and generation captured when a fetch is initiated."""

    generation: int
    category: Category
    sort_order: SortOrder


class CatalogVM:
    """Owns CatalogState: category, sort order, items and fetch lifecycle."""

    def __init__(
        self,
        *,
        category: Category = Category.TEMPLATE,
        sort_order: SortOrder = SortOrder.DESC,
        on_changed: Optional[Callable[["CatalogVM"], None]] = None,
    ) -> None:
        self._category = category
        self._sort_order = sort_order
        self._items: Tuple[CatalogItem, ...] = ()
        self._phase = FetchPhase.IDLE
        self._error: Optional[UseCaseError] = None
        self._generation = 0
        self.on_changed = on_changed

    # ---- Read API ----
    @property
    def category(self) -> Category:
        return self._category

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def items(self) -> Tuple[CatalogItem, ...]:
        return self._items

    @property
    def phase(self) -> FetchPhase:
        return self._phase

    @property
    def error(self) -> Optional[UseCaseError]:
        return self._error

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def view_state(self) -> CatalogViewState:
        if self._phase is FetchPhase.LOADING:
            return CatalogViewState.LOADING
        if self._phase is FetchPhase.FAILED:
            return CatalogViewState.FAILED
        if self._phase is FetchPhase.LOADED:
            return CatalogViewState.READY if self._items else CatalogViewState.EMPTY
        return CatalogViewState.IDLE

    # ---- Parameter changes ----
    def set_category(self, category: Category) -> bool:
        """Switch category; returns ``False`` when it is already active."""
        if category is self._category:
            return False
        self._category = category
        return True

    def set_sort_order(self, sort_order: SortOrder) -> bool:
        if sort_order is self._sort_order:
            return False
        self._sort_order = sort_order
        return True

    # ---- Fetch lifecycle ----
    def begin_fetch(self) -> FetchTicket:
        """Start a new fetch cycle and invalidate every earlier ticket."""
        self._generation += 1
        self._items = ()
        self._error = None
        self._phase = FetchPhase.LOADING
        ticket = FetchTicket(self._generation, self._category, self._sort_order)
        LOGGER.debug(
            "Fetch #%d started (%s/%s)", ticket.generation, ticket.category.value, ticket.sort_order.value
        )
        self._notify()
        return ticket

    def is_current(self, ticket: FetchTicket) -> bool:
        return ticket.generation == self._generation

    def complete(self, ticket: FetchTicket, items: Iterable[CatalogItem]) -> bool:
        """Apply a successful result if ``ticket`` is still the latest one."""
        if not self.is_current(ticket):
            LOGGER.debug("Discarding stale result of fetch #%d (current #%d)", ticket.generation, self._generation)
            return False
        self._items = tuple(items)
        self._error = None
        self._phase = FetchPhase.LOADED
        LOGGER.info(
            "Loaded %d items for %s/%s", len(self._items), ticket.category.value, ticket.sort_order.value
        )
        self._notify()
        return True

    def fail(self, ticket: FetchTicket, error: UseCaseError) -> bool:
        """Apply a failure if ``ticket`` is still the latest one; prior items are dropped."""
        if not self.is_current(ticket):
            LOGGER.debug("Discarding stale failure of fetch #%d (current #%d)", ticket.generation, self._generation)
            return False
        self._items = ()
        self._error = error
        self._phase = FetchPhase.FAILED
        LOGGER.warning("Fetch #%d failed: [%s] %s", ticket.generation, error.code, error.message)
        self._notify()
        return True

    def _notify(self) -> None:
        if self.on_changed:
            self.on_changed(self)


__all__ = ["CatalogVM", "CatalogViewState", "FetchPhase", "FetchTicket"]
