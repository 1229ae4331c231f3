from __future__ import annotations

from dataclasses import dataclass

from ..domain.items import CatalogItem, VoiceAgentItem
from ..domain.ports import ACTION_FAILED, ACTION_UNAVAILABLE, LinkPort, UseCaseError

MISSING_LINK_MESSAGE = "URL de Drive no disponible"


@dataclass
class OpenExternalLink:
    link_port: LinkPort

    def __call__(self, item: CatalogItem) -> str:
        """Open a voice agent's external URL in a new tab and return it."""
        if not isinstance(item, VoiceAgentItem) or not item.has_external_url:
            raise UseCaseError(ACTION_UNAVAILABLE, MISSING_LINK_MESSAGE)
        url = str(item.external_url).strip()
        try:
            self.link_port.open_url(url, new_tab=True)
        except Exception as exc:
            raise UseCaseError(ACTION_FAILED, f"No se pudo abrir {url}.") from exc
        return url
