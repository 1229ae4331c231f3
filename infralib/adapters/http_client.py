"""Shared HTTP transport for the REST adapters.

Every call is a single attempt: the catalog browser never retries on its own,
the user reloads instead. ``requests`` exceptions are translated into the
``ApiError`` tree here so adapters only deal with responses.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from infralib.adapters.api_errors import ApiError, ApiTimeoutError

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


@dataclass
class HttpConfig:
    """Timeouts in seconds for catalog requests and archive downloads."""

    request_timeout_s: int = 10
    download_timeout_s: int = 60


class HttpTransport:
    """Wraps one ``requests.Session`` with the configured timeouts."""

    def __init__(self, cfg: HttpConfig, session: Optional[requests.Session] = None) -> None:
        self.session = session if session is not None else requests.Session()
        self.cfg = cfg

    def get(self, url: str, *, accept: str = "*/*", timeout: Optional[int] = None) -> requests.Response:
        return self._send(
            "GET",
            url,
            headers={"Accept": accept},
            timeout=timeout or self.cfg.download_timeout_s,
        )

    def post(
        self, url: str, *, json_body: Dict[str, Any], timeout: Optional[int] = None
    ) -> requests.Response:
        return self._send(
            "POST",
            url,
            data=json.dumps(json_body),
            headers=dict(JSON_HEADERS),
            timeout=timeout or self.cfg.request_timeout_s,
        )

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Issue the request.

        Raises:
            ApiTimeoutError: Timeout or connection failure.
            ApiError: Any other ``requests`` transport error.
        """
        context = f"{method} {url}"
        send = self.session.post if method == "POST" else self.session.get
        try:
            return send(url, **kwargs)
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTimeoutError(f"No response from {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiError(str(exc), context=context) from exc


__all__ = ["HttpConfig", "HttpTransport", "JSON_HEADERS"]
