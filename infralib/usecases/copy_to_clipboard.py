from __future__ import annotations

from dataclasses import dataclass

from ..domain.items import CatalogItem
from ..domain.ports import ACTION_FAILED, ACTION_UNAVAILABLE, ClipboardPort, UseCaseError

MISSING_PAYLOAD_MESSAGE = "Este elemento no incluye JSON para copiar."
MISSING_URL_MESSAGE = "URL no disponible."


async def _write(clipboard: ClipboardPort, text: str, what: str) -> None:
    try:
        await clipboard.write_text(text)
    except Exception as exc:
        raise UseCaseError(ACTION_FAILED, f"No se pudo copiar {what} al portapapeles.") from exc


@dataclass
class CopyPayload:
    clipboard: ClipboardPort

    async def __call__(self, item: CatalogItem) -> str:
        """Copy the raw JSON payload and return the copied text."""
        if not item.has_payload:
            raise UseCaseError(ACTION_UNAVAILABLE, MISSING_PAYLOAD_MESSAGE)
        text = item.payload  # type: ignore[attr-defined]
        await _write(self.clipboard, text, "el JSON")
        return text


@dataclass
class CopyReferenceUrl:
    clipboard: ClipboardPort

    async def __call__(self, item: CatalogItem) -> str:
        """Copy the item's reference URL (source or external) and return it."""
        if not item.has_reference_url:
            raise UseCaseError(ACTION_UNAVAILABLE, MISSING_URL_MESSAGE)
        url = str(item.reference_url)
        await _write(self.clipboard, url, "la URL")
        return url
