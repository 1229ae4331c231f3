from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from infralib.domain.items import CatalogItem


@dataclass
class SelectionVM:
    """Holds overlay state: the item open in the detail panel and the enlarged image.

    The two fields are independent; either overlay can be open without the
    other. Listeners fire only when a field actually changes.
    """

    on_changed: Optional[Callable[["SelectionVM"], None]] = None

    _open_item: Optional[CatalogItem] = None
    _enlarged_image_url: Optional[str] = None

    @property
    def open_item(self) -> Optional[CatalogItem]:
        return self._open_item

    @property
    def enlarged_image_url(self) -> Optional[str]:
        return self._enlarged_image_url

    @property
    def detail_open(self) -> bool:
        return self._open_item is not None

    @property
    def image_open(self) -> bool:
        return self._enlarged_image_url is not None

    # ---- Detail overlay ----
    def open_detail(self, item: CatalogItem) -> None:
        if self._open_item is item or self._open_item == item:
            return
        self._open_item = item
        self._notify()

    def close_detail(self) -> None:
        had_item = self._open_item is not None
        self._open_item = None
        if had_item:
            self._notify()

    # ---- Image lightbox ----
    def enlarge_image(self, url: Optional[str]) -> None:
        if not url or not url.strip():
            return
        if url == self._enlarged_image_url:
            return
        self._enlarged_image_url = url
        self._notify()

    def dismiss_image(self) -> None:
        had_image = self._enlarged_image_url is not None
        self._enlarged_image_url = None
        if had_image:
            self._notify()

    def clear(self) -> None:
        changed = self._open_item is not None or self._enlarged_image_url is not None
        self._open_item = None
        self._enlarged_image_url = None
        if changed:
            self._notify()

    def _notify(self) -> None:
        if self.on_changed:
            self.on_changed(self)
