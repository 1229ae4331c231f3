from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Set, Tuple

from infralib.domain.items import CatalogItem, Category, SortOrder, parse_item
from infralib.domain.ports import INVALID_FORMAT, UNREACHABLE, CatalogPort, UseCaseError
from infralib.usecases.error_mapping import map_api_error

LOGGER = logging.getLogger(__name__)

INVALID_FORMAT_MESSAGE = "Formato de datos inválido recibido del servidor"
UNREACHABLE_MESSAGE = "Error al obtener los datos. Por favor, intente nuevamente."


def extract_records(payload: Any) -> List[Any]:
    """Return the ``data`` array of a provider response or raise INVALID_FORMAT."""
    if not isinstance(payload, Mapping):
        raise UseCaseError(INVALID_FORMAT, INVALID_FORMAT_MESSAGE)
    records = payload.get("data")
    if not isinstance(records, list):
        raise UseCaseError(INVALID_FORMAT, INVALID_FORMAT_MESSAGE)
    return records


@dataclass
class FetchCatalog:
    catalog_port: CatalogPort

    def __call__(self, category: Category, sort_order: SortOrder) -> List[CatalogItem]:
        """Fetch one category in the given order and return parsed items.

        Raises:
            UseCaseError: ``UNREACHABLE`` for transport/HTTP failures,
                ``INVALID_FORMAT`` when the body is not ``{"data": [...]}``.
        """
        try:
            payload = self.catalog_port.fetch_catalog(category.wire_value, sort_order.value)
        except Exception as exc:
            err = map_api_error(exc, default_code=UNREACHABLE, default_message=UNREACHABLE_MESSAGE)
            LOGGER.warning("Catalog fetch failed (%s/%s): %s", category.value, sort_order.value, exc)
            raise err from exc

        records = extract_records(payload)
        items: List[CatalogItem] = []
        seen: Set[Tuple[str, str]] = set()
        for record in records:
            if not isinstance(record, Mapping):
                LOGGER.warning("Skipping non-object catalog entry: %r", record)
                continue
            item = parse_item(record, category)
            if item.identity in seen:
                LOGGER.warning("Duplicate catalog entry %r dropped", item.identity)
                continue
            seen.add(item.identity)
            items.append(item)
        LOGGER.debug("Fetched %d items for %s/%s", len(items), category.value, sort_order.value)
        return items
