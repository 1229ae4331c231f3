"""Catalog item variants and the capability checks consulted by actions and views."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple

LOGGER = logging.getLogger(__name__)


class Category(str, Enum):
    """Content bucket selecting which collection the provider returns."""

    TEMPLATE = "n8n"
    FLOW = "flowise"
    VOICE_AGENT = "retell"

    @property
    def wire_value(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "Category":
        """Accept wire values, member names or glossary names (case-insensitive)."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower().replace("-", "_")
        for member in cls:
            aliases = {member.value, member.name.lower(), member.name.lower().replace("_", "")}
            if text in aliases or text.replace("_", "") in aliases:
                return member
        raise ValueError(f"Unknown category: {value!r}")


class SortOrder(str, Enum):
    """Sort directive forwarded to the provider; no local sorting happens."""

    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC

    @classmethod
    def parse(cls, value: Any) -> "SortOrder":
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown sort order: {value!r}")


class ItemKind(str, Enum):
    """Discriminant of the closed set of catalog item variants."""

    TEMPLATE = "template"
    ARCHIVE = "archive"
    VOICE_AGENT = "voice_agent"


class ActionKind(str, Enum):
    """Overlay actions an item may offer."""

    COPY_PAYLOAD = "copy_payload"
    DOWNLOAD_PAYLOAD = "download_payload"
    COPY_REFERENCE_URL = "copy_reference_url"
    OPEN_EXTERNAL_LINK = "open_external_link"
    DOWNLOAD_ARCHIVE_FILE = "download_archive_file"


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True)
class ArchiveFile:
    """One downloadable entry of a multi-file template."""

    title: str
    path: str

    def to_wire(self) -> Dict[str, str]:
        return {"title": self.title, "path": self.path}


@dataclass(frozen=True)
class CatalogItem:
    """Fields shared by every catalog record.

    ``name`` and ``date`` together form the identity used for list keys and
    lookups. Malformed records are kept with empty strings instead of being
    rejected.
    """

    kind: ClassVar[ItemKind]

    name: str = ""
    date: str = ""
    description: str = ""
    image: str = ""
    tutorial_link: Optional[str] = None
    price: Optional[float] = None

    @property
    def identity(self) -> Tuple[str, str]:
        return (self.name, self.date)

    @property
    def has_tutorial(self) -> bool:
        return _present(self.tutorial_link)

    # ---- Capability checks ----
    @property
    def has_payload(self) -> bool:
        return False

    @property
    def has_external_url(self) -> bool:
        return False

    @property
    def has_files(self) -> bool:
        return False

    @property
    def reference_url(self) -> Optional[str]:
        return None

    @property
    def has_reference_url(self) -> bool:
        return _present(self.reference_url)

    def to_wire(self) -> Dict[str, Any]:
        """Return the record using the provider's field names."""
        return {
            "nombre": self.name,
            "imagen": self.image,
            "loom": self.tutorial_link,
            "descripcion": self.description,
            "fecha": self.date,
            "precio": self.price,
        }


@dataclass(frozen=True)
class TemplateItem(CatalogItem):
    """Workflow template carrying an embedded JSON payload."""

    kind: ClassVar[ItemKind] = ItemKind.TEMPLATE

    payload: Optional[str] = None
    source_url: Optional[str] = None

    @property
    def has_payload(self) -> bool:
        return _present(self.payload)

    @property
    def reference_url(self) -> Optional[str]:
        return self.source_url

    def to_wire(self) -> Dict[str, Any]:
        record = super().to_wire()
        record["json"] = self.payload
        record["url"] = self.source_url
        return record


@dataclass(frozen=True)
class ArchiveItem(TemplateItem):
    """Template whose artifact is split across several downloadable files."""

    kind: ClassVar[ItemKind] = ItemKind.ARCHIVE

    files: Tuple[ArchiveFile, ...] = field(default_factory=tuple)

    @property
    def has_files(self) -> bool:
        return len(self.files) > 0

    def to_wire(self) -> Dict[str, Any]:
        record = super().to_wire()
        record["archivo"] = [entry.to_wire() for entry in self.files]
        return record


@dataclass(frozen=True)
class VoiceAgentItem(CatalogItem):
    """Voice agent published as an outbound link (shared folder)."""

    kind: ClassVar[ItemKind] = ItemKind.VOICE_AGENT

    external_url: Optional[str] = None

    @property
    def has_external_url(self) -> bool:
        return _present(self.external_url)

    @property
    def reference_url(self) -> Optional[str]:
        return self.external_url

    def to_wire(self) -> Dict[str, Any]:
        record = super().to_wire()
        record["url"] = self.external_url
        return record


def available_actions(item: CatalogItem) -> Tuple[ActionKind, ...]:
    """Return the action set an item supports, decided by its populated fields.

    A non-empty file list takes precedence over an embedded payload.
    """
    if item.has_files:
        return (ActionKind.DOWNLOAD_ARCHIVE_FILE,)
    actions: List[ActionKind] = []
    if isinstance(item, VoiceAgentItem):
        actions.append(ActionKind.OPEN_EXTERNAL_LINK)
    elif isinstance(item, TemplateItem):
        if item.has_payload:
            actions.append(ActionKind.COPY_PAYLOAD)
        actions.append(ActionKind.DOWNLOAD_PAYLOAD)
    if item.has_reference_url:
        actions.append(ActionKind.COPY_REFERENCE_URL)
    return tuple(actions)


# ---- Wire parsing ----
def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _optional_text(value: Any) -> Optional[str]:
    text = _text(value)
    return text if text.strip() else None


def _price(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _payload(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return _optional_text(value)


def _files(value: Any) -> Tuple[ArchiveFile, ...]:
    if not isinstance(value, list):
        return ()
    entries: List[ArchiveFile] = []
    for raw in value:
        if not isinstance(raw, Mapping):
            LOGGER.warning("Skipping malformed archive entry: %r", raw)
            continue
        path = _text(raw.get("path")).strip()
        if not path:
            LOGGER.warning("Skipping archive entry without path: %r", raw)
            continue
        entries.append(ArchiveFile(title=_text(raw.get("title")), path=path))
    return tuple(entries)


def parse_item(record: Mapping[str, Any], category: Category) -> CatalogItem:
    """Build the matching item variant from one provider record."""
    common = dict(
        name=_text(record.get("nombre")),
        date=_text(record.get("fecha")),
        description=_text(record.get("descripcion")),
        image=_text(record.get("imagen")),
        tutorial_link=_optional_text(record.get("loom")),
        price=_price(record.get("precio")),
    )
    files = _files(record.get("archivo"))
    if files:
        return ArchiveItem(
            **common,
            payload=_payload(record.get("json")),
            source_url=_optional_text(record.get("url")),
            files=files,
        )
    if category is Category.VOICE_AGENT:
        return VoiceAgentItem(**common, external_url=_optional_text(record.get("url")))
    return TemplateItem(
        **common,
        payload=_payload(record.get("json")),
        source_url=_optional_text(record.get("url")),
    )


__all__ = [
    "ActionKind",
    "ArchiveFile",
    "ArchiveItem",
    "CatalogItem",
    "Category",
    "ItemKind",
    "SortOrder",
    "TemplateItem",
    "VoiceAgentItem",
    "available_actions",
    "parse_item",
]
