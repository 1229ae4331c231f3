from __future__ import annotations
from typing import Any, BinaryIO, ContextManager, Protocol


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


INVALID_FORMAT = "INVALID_FORMAT"
UNREACHABLE = "UNREACHABLE"
ACTION_UNAVAILABLE = "ACTION_UNAVAILABLE"
ACTION_FAILED = "ACTION_FAILED"


# ---- Ports (Hexagonal boundaries) ----
class CatalogPort(Protocol):
    """Single remote endpoint returning the catalog for one category/sort pair."""

    def fetch_catalog(self, library: str, sort: str) -> Any: ...  # decoded JSON body


class FilePort(Protocol):
    """Fetches archive entries as raw bytes."""

    def fetch_file(self, path: str) -> bytes: ...


class ClipboardPort(Protocol):
    """Writes text to the clipboard; completes once the write was confirmed."""

    async def write_text(self, text: str) -> None: ...


class SavePort(Protocol):
    """Saves bytes as a named file.

    ``open_blob`` yields a writable handle; the save is triggered when the
    block exits cleanly and the handle is released on every exit path.
    """

    def open_blob(self, filename: str, media_type: str) -> ContextManager[BinaryIO]: ...


class LinkPort(Protocol):
    """Navigates to an outbound URL."""

    def open_url(self, url: str, *, new_tab: bool = True) -> None: ...
