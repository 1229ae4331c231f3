"""Thin web-facing projections for NiceGUI bindings.

These projections turn catalog items into card and detail-panel rows without
adding I/O or orchestration logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from infralib.domain.items import ActionKind, CatalogItem, VoiceAgentItem, available_actions
from infralib.viewmodels.catalog_format import (
    PLACEHOLDER_IMAGE,
    short_description,
    tutorial_label,
)

ACTION_LABELS = {
    ActionKind.COPY_PAYLOAD: ("Copiar JSON", "content_copy"),
    ActionKind.DOWNLOAD_PAYLOAD: ("Descargar JSON", "download"),
    ActionKind.COPY_REFERENCE_URL: ("Copiar URL", "link"),
    ActionKind.OPEN_EXTERNAL_LINK: ("Ir a Carpeta Drive", "folder_open"),
    ActionKind.DOWNLOAD_ARCHIVE_FILE: ("Descargar", "download"),
}


@dataclass(frozen=True)
class CatalogCard:
    """One grid card."""

    title: str
    description: str
    tooltip: str
    image_src: str
    tutorial_label: str
    tutorial_href: Optional[str]
    primary_label: str
    opens_link: bool


@dataclass(frozen=True)
class ActionButton:
    kind: ActionKind
    label: str
    icon: str


@dataclass(frozen=True)
class FileRow:
    index: int
    label: str


@dataclass
class DetailPanel:
    """Content of the detail overlay for the open item."""

    title: str
    actions: List[ActionButton] = field(default_factory=list)
    files: List[FileRow] = field(default_factory=list)

    @property
    def lists_files(self) -> bool:
        return bool(self.files)


def build_card(item: CatalogItem) -> CatalogCard:
    is_voice = isinstance(item, VoiceAgentItem)
    image = item.image or (PLACEHOLDER_IMAGE if is_voice else "")
    return CatalogCard(
        title=item.name,
        description=short_description(item.description),
        tooltip=item.description or "",
        image_src=image,
        tutorial_label=tutorial_label(item.tutorial_link),
        tutorial_href=item.tutorial_link if item.has_tutorial else None,
        primary_label="Ir a Carpeta Drive" if is_voice else "Descargar",
        opens_link=is_voice,
    )


def build_cards(items: Sequence[CatalogItem]) -> Tuple[CatalogCard, ...]:
    return tuple(build_card(item) for item in items)


def build_detail_panel(item: CatalogItem) -> DetailPanel:
    panel = DetailPanel(title=item.name)
    for kind in available_actions(item):
        if kind is ActionKind.DOWNLOAD_ARCHIVE_FILE:
            panel.files = [
                FileRow(index=index, label=f"{index + 1}. {entry.title}")
                for index, entry in enumerate(item.files)  # type: ignore[attr-defined]
            ]
            continue
        label, icon = ACTION_LABELS[kind]
        panel.actions.append(ActionButton(kind=kind, label=label, icon=icon))
    return panel


__all__ = [
    "ACTION_LABELS",
    "ActionButton",
    "CatalogCard",
    "DetailPanel",
    "FileRow",
    "build_card",
    "build_cards",
    "build_detail_panel",
]
