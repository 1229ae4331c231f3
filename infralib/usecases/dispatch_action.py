"""Action surface of the detail overlay.

Each command runs one use case against the open item and returns ``Notice``
values for the view. Use-case errors become notices; nothing here touches
catalog or selection state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional, Sequence

from ..domain.items import ActionKind, CatalogItem, available_actions
from ..domain.ports import (
    ACTION_FAILED,
    ACTION_UNAVAILABLE,
    ClipboardPort,
    FilePort,
    LinkPort,
    SavePort,
    UseCaseError,
)
from .copy_to_clipboard import MISSING_PAYLOAD_MESSAGE, MISSING_URL_MESSAGE, CopyPayload, CopyReferenceUrl
from .download_archive_files import NO_FILES_MESSAGE, ArchiveDownloadReport, DownloadArchiveFiles
from .download_payload import NO_PAYLOAD_MESSAGE, DownloadPayload
from .open_external_link import MISSING_LINK_MESSAGE, OpenExternalLink

LOGGER = logging.getLogger(__name__)

IoBound = Callable[..., Awaitable[Any]]

UNAVAILABLE_MESSAGES = {
    ActionKind.COPY_PAYLOAD: MISSING_PAYLOAD_MESSAGE,
    ActionKind.DOWNLOAD_PAYLOAD: NO_PAYLOAD_MESSAGE,
    ActionKind.COPY_REFERENCE_URL: MISSING_URL_MESSAGE,
    ActionKind.OPEN_EXTERNAL_LINK: MISSING_LINK_MESSAGE,
    ActionKind.DOWNLOAD_ARCHIVE_FILE: NO_FILES_MESSAGE,
}


@dataclass(frozen=True)
class Notice:
    """Transient, non-blocking message for the view (``ui.notify`` levels)."""

    level: str
    message: str
    code: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.level in ("warning", "negative")


def _notice_for(exc: UseCaseError) -> Notice:
    level = "warning" if exc.code == ACTION_UNAVAILABLE else "negative"
    return Notice(level=level, message=exc.message, code=exc.code)


def archive_report_notices(report: ArchiveDownloadReport) -> List[Notice]:
    notices: List[Notice] = []
    for result in report.failed:
        notices.append(
            Notice(
                "negative",
                f"Error al descargar archivo: {result.title or result.filename} ({result.error})",
                ACTION_FAILED,
            )
        )
    if report.saved:
        names = ", ".join(result.filename for result in report.saved)
        notices.append(Notice("positive", f"Descargado: {names}"))
    return notices


class ActionDispatcher:
    """Run overlay actions against an item and report the outcome as notices."""

    def __init__(
        self,
        *,
        clipboard: ClipboardPort,
        save_port: SavePort,
        link_port: LinkPort,
        file_port: FilePort,
        io_bound: Optional[IoBound] = None,
    ) -> None:
        self.uc_copy_payload = CopyPayload(clipboard)
        self.uc_copy_reference_url = CopyReferenceUrl(clipboard)
        self.uc_download_payload = DownloadPayload(save_port)
        self.uc_open_external_link = OpenExternalLink(link_port)
        self.uc_download_archive = DownloadArchiveFiles(file_port, save_port, io_bound=io_bound)

    async def copy_payload(self, item: CatalogItem) -> Notice:
        try:
            await self.uc_copy_payload(item)
        except UseCaseError as exc:
            return self._rejected(ActionKind.COPY_PAYLOAD, item, exc)
        return Notice("positive", "JSON copiado al portapapeles!")

    def download_payload(self, item: CatalogItem) -> Notice:
        try:
            filename = self.uc_download_payload(item)
        except UseCaseError as exc:
            return self._rejected(ActionKind.DOWNLOAD_PAYLOAD, item, exc)
        return Notice("positive", f"Descargando {filename}")

    async def copy_reference_url(self, item: CatalogItem) -> Notice:
        try:
            await self.uc_copy_reference_url(item)
        except UseCaseError as exc:
            return self._rejected(ActionKind.COPY_REFERENCE_URL, item, exc)
        return Notice("positive", "URL copiada al portapapeles!")

    def open_external_link(self, item: CatalogItem) -> Notice:
        try:
            url = self.uc_open_external_link(item)
        except UseCaseError as exc:
            return self._rejected(ActionKind.OPEN_EXTERNAL_LINK, item, exc)
        return Notice("info", f"Abriendo {url}")

    async def download_archive_files(
        self, item: CatalogItem, indices: Optional[Sequence[int]] = None
    ) -> List[Notice]:
        try:
            report = await self.uc_download_archive(item, indices)
        except UseCaseError as exc:
            return [self._rejected(ActionKind.DOWNLOAD_ARCHIVE_FILE, item, exc)]
        return archive_report_notices(report)

    async def dispatch(
        self, kind: ActionKind, item: CatalogItem, *, file_index: Optional[int] = None
    ) -> List[Notice]:
        """Run ``kind`` against ``item``; ``file_index`` picks one archive entry.

        Kinds outside ``available_actions(item)`` are rejected before any port
        is touched.
        """
        kind = ActionKind(kind)
        if kind not in available_actions(item):
            rejection = UseCaseError(ACTION_UNAVAILABLE, UNAVAILABLE_MESSAGES[kind])
            return [self._rejected(kind, item, rejection)]
        if kind is ActionKind.COPY_PAYLOAD:
            return [await self.copy_payload(item)]
        if kind is ActionKind.DOWNLOAD_PAYLOAD:
            return [self.download_payload(item)]
        if kind is ActionKind.COPY_REFERENCE_URL:
            return [await self.copy_reference_url(item)]
        if kind is ActionKind.OPEN_EXTERNAL_LINK:
            return [self.open_external_link(item)]
        if kind is ActionKind.DOWNLOAD_ARCHIVE_FILE:
            indices = None if file_index is None else [file_index]
            return await self.download_archive_files(item, indices)
        raise ValueError(f"Unknown action: {kind!r}")

    @staticmethod
    def _rejected(kind: ActionKind, item: CatalogItem, exc: UseCaseError) -> Notice:
        LOGGER.warning("%s on %r rejected: [%s] %s", kind.value, item.name, exc.code, exc.message)
        return _notice_for(exc)


__all__ = ["ActionDispatcher", "Notice", "archive_report_notices"]
