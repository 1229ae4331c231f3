"""Domain package exports for catalog items and ports."""

from .items import (
    ActionKind,
    ArchiveFile,
    ArchiveItem,
    CatalogItem,
    Category,
    ItemKind,
    SortOrder,
    TemplateItem,
    VoiceAgentItem,
    available_actions,
    parse_item,
)
from .ports import UseCaseError

__all__ = [
    "ActionKind",
    "ArchiveFile",
    "ArchiveItem",
    "CatalogItem",
    "Category",
    "ItemKind",
    "SortOrder",
    "TemplateItem",
    "UseCaseError",
    "VoiceAgentItem",
    "available_actions",
    "parse_item",
]
