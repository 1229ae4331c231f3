from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from typing import BinaryIO, Iterator, List

from infralib.domain.ports import SavePort
from infralib.utils.download_names import sanitize_filename

LOGGER = logging.getLogger(__name__)


class LocalSaveAdapter(SavePort):
    """Save downloads into a local directory.

    Content is staged in a temporary file next to the target and moved into
    place only when the writer block finishes cleanly; the staging file is
    removed on every other exit path.
    """

    def __init__(self, target_dir: str = ".") -> None:
        self.target_dir = target_dir
        self.saved_paths: List[str] = []

    @contextmanager
    def open_blob(self, filename: str, media_type: str = "application/octet-stream") -> Iterator[BinaryIO]:
        os.makedirs(self.target_dir, exist_ok=True)
        target = os.path.join(self.target_dir, sanitize_filename(filename))
        fd, staging = tempfile.mkstemp(prefix=".infralib-", suffix=".part", dir=self.target_dir)
        handle = os.fdopen(fd, "wb")
        try:
            yield handle
            handle.close()
            os.replace(staging, target)
            self.saved_paths.append(os.path.abspath(target))
            LOGGER.info("Saved %s (%s)", target, media_type)
        finally:
            if not handle.closed:
                handle.close()
            if os.path.exists(staging):
                os.remove(staging)


__all__ = ["LocalSaveAdapter"]
