from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from ..domain.items import CatalogItem, TemplateItem
from ..domain.ports import ACTION_FAILED, ACTION_UNAVAILABLE, SavePort, UseCaseError
from ..utils.download_names import payload_filename

LOGGER = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
NO_PAYLOAD_MESSAGE = "Este elemento no tiene JSON descargable."


def payload_content(item: CatalogItem) -> str:
    """Return the text saved by a payload download.

    Templates with a payload save it verbatim; templates without one fall back
    to the whole record serialized in wire shape. Archive items with files and
    voice agents have no payload download.
    """
    if item.has_files or not isinstance(item, TemplateItem):
        raise UseCaseError(ACTION_UNAVAILABLE, NO_PAYLOAD_MESSAGE)
    if item.has_payload:
        return str(item.payload)
    return json.dumps(item.to_wire(), ensure_ascii=False)


@dataclass
class DownloadPayload:
    save_port: SavePort

    def __call__(self, item: CatalogItem) -> str:
        """Save the payload as ``<name>.json`` and return the filename."""
        content = payload_content(item)
        filename = payload_filename(item.name)
        try:
            with self.save_port.open_blob(filename, JSON_MEDIA_TYPE) as handle:
                handle.write(content.encode("utf-8"))
        except Exception as exc:
            LOGGER.warning("Payload download of %s failed: %s", filename, exc)
            raise UseCaseError(ACTION_FAILED, f"No se pudo descargar {filename}.") from exc
        return filename
