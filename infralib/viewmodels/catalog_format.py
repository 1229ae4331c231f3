"""Display labeling helpers for catalog cards and the page header.

Call context:
    ``infralib.web_ui.viewmodels`` and ``infralib.web_ui.main`` call these
    helpers so every card, button and placeholder uses the same wording.
"""

from __future__ import annotations

from typing import Optional

from infralib.domain.items import Category, SortOrder

DESCRIPTION_LIMIT = 100
NO_DESCRIPTION = "Sin descripción"
PAGE_TITLE = "Infragrowth Library"
EMPTY_TITLE = "Templates Pronto"
EMPTY_SUBTITLE = "Estamos trabajando en nuevos templates"
RETRY_LABEL = "Reintentar"
PLACEHOLDER_IMAGE = "/placeholder-image.jpg"


def short_description(description: Optional[str], *, limit: int = DESCRIPTION_LIMIT) -> str:
    """Truncate a description for card display, with a fallback for empty text."""
    text = description or ""
    if len(text) > limit:
        return text[:limit] + "..."
    return text or NO_DESCRIPTION


def tutorial_label(tutorial_link: Optional[str]) -> str:
    return "Ver Tutorial" if tutorial_link and tutorial_link.strip() else "Tutorial Pendiente"


def sort_label(sort_order: SortOrder) -> str:
    return "Más antiguos primero" if sort_order is SortOrder.ASC else "Más recientes primero"


def category_label(category: Category) -> str:
    mapping = {
        Category.TEMPLATE: "n8n Templates",
        Category.FLOW: "Flowise Templates",
        Category.VOICE_AGENT: "Voice Agents",
    }
    return mapping[category]


__all__ = [
    "DESCRIPTION_LIMIT",
    "EMPTY_SUBTITLE",
    "EMPTY_TITLE",
    "NO_DESCRIPTION",
    "PAGE_TITLE",
    "PLACEHOLDER_IMAGE",
    "RETRY_LABEL",
    "category_label",
    "short_description",
    "sort_label",
    "tutorial_label",
]
