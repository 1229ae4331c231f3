from __future__ import annotations

from typing import Any, Mapping, Optional


class ApiError(RuntimeError):
    """Base class for REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the catalog provider or file host."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        code: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            status=status,
            code=code,
            payload=payload,
            context=context,
        )


class ApiServerError(ApiError):
    """HTTP 5xx from the catalog provider or file host."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            status=status,
            payload=payload,
            context=context,
        )


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, context=context)


class ApiFormatError(ApiError):
    """Response body could not be decoded as JSON."""

    def __init__(
        self,
        message: str,
        *,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, payload=payload, context=context)


_DETAIL_KEYS = ("message", "error", "detail")


def error_body(resp: Any) -> Any:
    """Decoded JSON of an error response, else a short text snippet or ``None``."""
    try:
        return resp.json()
    except ValueError:
        text = (getattr(resp, "text", "") or "").strip()
        return text[:400] or None


def error_detail(body: Any) -> Optional[str]:
    """Human-readable reason from an error body.

    n8n webhooks answer ``{"code": ..., "message": ...}``; plain-text bodies are
    used as they are.
    """
    if isinstance(body, str):
        return body.strip() or None
    if isinstance(body, Mapping):
        for key in _DETAIL_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return None


def raise_for_status(resp: Any, ctx: str) -> None:
    """Raise the typed ``ApiError`` matching a non-2xx response."""
    status = int(getattr(resp, "status_code", 0) or 0)
    if 200 <= status < 300:
        return
    body = error_body(resp)
    detail = error_detail(body)
    message = f"{ctx}: {detail} (HTTP {status})" if detail else f"{ctx}: HTTP {status}"
    if 400 <= status < 500:
        raise ApiClientError(message, status=status, payload=body, context=ctx)
    if status >= 500:
        raise ApiServerError(message, status=status, payload=body, context=ctx)
    raise ApiError(message, status=status, payload=body, context=ctx)
