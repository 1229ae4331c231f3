"""Per-file downloads for multi-file templates."""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Sequence

from ..domain.items import ArchiveFile, CatalogItem
from ..domain.ports import ACTION_FAILED, ACTION_UNAVAILABLE, FilePort, SavePort, UseCaseError
from ..utils.download_names import archive_entry_filename
from .error_mapping import map_api_error

LOGGER = logging.getLogger(__name__)

IoBound = Callable[..., Awaitable[Any]]

NO_FILES_MESSAGE = "Este elemento no tiene archivos descargables."


@dataclass(frozen=True)
class FileDownloadResult:
    """Outcome of one archive entry download."""

    index: int
    title: str
    filename: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ArchiveDownloadReport:
    """Results in the order the files were requested."""

    results: List[FileDownloadResult] = field(default_factory=list)

    @property
    def saved(self) -> List[FileDownloadResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> List[FileDownloadResult]:
        return [result for result in self.results if not result.ok]

    @property
    def all_ok(self) -> bool:
        return not self.failed


class DownloadArchiveFiles:
    """Fetch each archive entry by ``path`` and save it under its ``title``.

    Entries are processed in list order. A failing entry is recorded in the
    report and the remaining entries are still attempted.
    """

    def __init__(
        self,
        file_port: FilePort,
        save_port: SavePort,
        *,
        io_bound: Optional[IoBound] = None,
    ) -> None:
        self.file_port = file_port
        self.save_port = save_port
        self._io_bound: IoBound = io_bound or asyncio.to_thread

    async def __call__(
        self, item: CatalogItem, indices: Optional[Sequence[int]] = None
    ) -> ArchiveDownloadReport:
        if not item.has_files:
            raise UseCaseError(ACTION_UNAVAILABLE, NO_FILES_MESSAGE)
        files: Sequence[ArchiveFile] = item.files  # type: ignore[attr-defined]
        selected = list(range(len(files))) if indices is None else list(indices)
        for index in selected:
            if not 0 <= index < len(files):
                raise UseCaseError(ACTION_UNAVAILABLE, f"Archivo {index + 1} no disponible.")

        report = ArchiveDownloadReport()
        for index in selected:
            entry = files[index]
            report.results.append(await self._download_one(index, entry))
        return report

    async def _download_one(self, index: int, entry: ArchiveFile) -> FileDownloadResult:
        filename = archive_entry_filename(entry.title, entry.path, index=index)
        try:
            data = await self._io_bound(self.file_port.fetch_file, entry.path)
            media_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
            with self.save_port.open_blob(filename, media_type) as handle:
                handle.write(data)
        except Exception as exc:
            message = map_api_error(exc, default_code=ACTION_FAILED).message
            LOGGER.warning("Archive entry %d (%s) failed: %s", index + 1, entry.path, exc)
            return FileDownloadResult(index=index, title=entry.title, filename=filename, error=message)
        LOGGER.info("Archive entry %d saved as %s", index + 1, filename)
        return FileDownloadResult(index=index, title=entry.title, filename=filename)


__all__ = ["ArchiveDownloadReport", "DownloadArchiveFiles", "FileDownloadResult"]
