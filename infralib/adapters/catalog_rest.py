from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from infralib.domain.ports import CatalogPort

from .api_errors import ApiFormatError, raise_for_status
from .http_client import HttpConfig, HttpTransport

LOGGER = logging.getLogger(__name__)


class CatalogRestAdapter(CatalogPort):
    """REST adapter for the catalog webhook.

    One POST per fetch cycle; the JSON body carries both the library type and
    the sort directive. The decoded response is returned untouched so the use
    case owns shape validation.
    """

    def __init__(
        self,
        endpoint_url: str,
        *,
        request_timeout_s: int = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not endpoint_url or not str(endpoint_url).strip():
            raise ValueError("CatalogRestAdapter requires an endpoint URL")
        self.endpoint_url = str(endpoint_url).strip()
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.http = HttpTransport(self.cfg, session=session)

    def fetch_catalog(self, library: str, sort: str) -> Any:
        ctx = f"catalog[{library}/{sort}]"
        LOGGER.debug("POST %s type=%s sort=%s", self.endpoint_url, library, sort)
        resp = self.http.post(self.endpoint_url, json_body={"type": library, "sort": sort})
        raise_for_status(resp, ctx)
        try:
            return resp.json()
        except ValueError as exc:
            snippet = (getattr(resp, "text", "") or "")[:200]
            raise ApiFormatError(f"{ctx}: response is not JSON", payload=snippet, context=ctx) from exc


__all__ = ["CatalogRestAdapter"]
