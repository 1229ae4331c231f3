from __future__ import annotations

import posixpath
import re
from typing import Optional

_UNSAFE_FILENAME_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]+')


def _value_or_none(value: Optional[str]) -> Optional[str]:
    """Return a trimmed string or None when the input is empty."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def payload_filename(name: Optional[str], *, fallback: str = "template") -> str:
    """Return the ``<name>.json`` download name for a template payload."""
    base = _value_or_none(name) or fallback
    return f"{base}.json"


def archive_entry_filename(title: Optional[str], path: str, *, index: int = 0) -> str:
    """Return the save name for an archive entry, falling back to the path basename."""
    candidate = _value_or_none(title)
    if candidate:
        return candidate
    basename = posixpath.basename(path.split("?", 1)[0].rstrip("/"))
    return basename or f"archivo-{index + 1}"


def sanitize_filename(raw: Optional[str], *, fallback: str = "download") -> str:
    """Make a filename safe for the local filesystem without changing readable text."""
    candidate = _value_or_none(raw)
    if candidate is None:
        return fallback
    sanitized = _UNSAFE_FILENAME_RE.sub("_", candidate)
    # Collapse duplicate separators so the name stays compact.
    sanitized = re.sub(r"_+", "_", sanitized)
    sanitized = sanitized.strip(" ._")
    return sanitized or fallback
