"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations


from typing import Optional

from postboard.adapters.api_errors import (
    ApiClientError,
    ApiConnectionError,
    ApiDecodeError,
    ApiEmptyResponseError,
    ApiEncodeError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    extract_error_hint,
)
from postboard.domain.ports import UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by an adapter or the use case itself.
        default_code: Code used when ``exc`` is not an adapter error.
        default_message: Message used for unknown errors without text.

    Returns:
        UseCaseError whose ``message`` is safe to show to the user.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiConnectionError):
        return UseCaseError("CONNECTION_FAILED", str(exc) or "Could not reach the server.")
    if isinstance(exc, ApiEmptyResponseError):
        return UseCaseError("NO_DATA", "No data received.")
    if isinstance(exc, ApiDecodeError):
        return UseCaseError("DECODE_FAILED", _compose_error_message("Unexpected response from server", str(exc)))
    if isinstance(exc, ApiEncodeError):
        return UseCaseError("ENCODE_FAILED", _compose_error_message("Could not encode request", str(exc)))
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        hint = exc.hint or extract_error_hint(getattr(exc, "payload", None))
        if status == 404:
            return UseCaseError("NOT_FOUND", _compose_error_message("Post not found", hint))
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, hint))
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", f"Server error (HTTP {exc.status}), try again.")
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc) or "Request failed.")

    message = str(exc) or default_message or "Unexpected error."
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
