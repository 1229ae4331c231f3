from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urljoin

import requests

from infralib.domain.ports import FilePort

from .api_errors import raise_for_status
from .http_client import HttpConfig, HttpTransport

LOGGER = logging.getLogger(__name__)


class ArchiveFileHttpAdapter(FilePort):
    """Plain GET download of archive entries.

    Relative entry paths are resolved against ``base_url``; absolute URLs are
    used as-is.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        download_timeout_s: int = 60,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = str(base_url or "").strip()
        self.cfg = HttpConfig(download_timeout_s=download_timeout_s)
        self.http = HttpTransport(self.cfg, session=session)

    def resolve(self, path: str) -> str:
        if not self.base_url:
            return path
        return urljoin(self.base_url if self.base_url.endswith("/") else f"{self.base_url}/", path)

    def fetch_file(self, path: str) -> bytes:
        url = self.resolve(path)
        LOGGER.debug("GET %s", url)
        resp = self.http.get(url)
        raise_for_status(resp, f"file[{path}]")
        return bytes(resp.content or b"")


__all__ = ["ArchiveFileHttpAdapter"]
