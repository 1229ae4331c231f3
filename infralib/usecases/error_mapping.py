"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations


from typing import Optional

from infralib.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiFormatError,
    ApiServerError,
    ApiTimeoutError,
)
from infralib.domain.ports import INVALID_FORMAT, UNREACHABLE, UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc (Exception): Failure raised by an adapter or port implementation.
        default_code (str): Code used for exceptions outside the ``ApiError`` tree.
        default_message (Optional[str]): Message used when ``exc`` has no text.

    Returns:
        UseCaseError: Value returned to the caller.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiFormatError):
        return UseCaseError(INVALID_FORMAT, "Formato de datos inválido recibido del servidor")
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError(UNREACHABLE, "Tiempo de espera agotado. Revise su conexión.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        return UseCaseError(UNREACHABLE, _compose_error_message(f"Solicitud fallida (HTTP {status})", str(exc)))
    if isinstance(exc, ApiServerError):
        return UseCaseError(UNREACHABLE, "Error del servidor, intente nuevamente.")
    if isinstance(exc, ApiError):
        return UseCaseError(UNREACHABLE, str(exc) or "Solicitud fallida.")

    message = default_message or str(exc) or "Error inesperado."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    """Compose a user-facing error message with optional hint text."""
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
