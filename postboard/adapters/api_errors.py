"""Exception types raised by the posts adapters.

Adapters raise these; ``postboard.usecases.error_mapping`` turns them into
``UseCaseError`` codes the UI can show.
"""

from __future__ import annotations

from typing import Any, Optional

_DETAIL_KEYS = ("message", "error", "detail", "title")
_SNIPPET_LIMIT = 200


class ApiError(RuntimeError):
    """Base class for posts API failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.hint = hint
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx response."""


class ApiServerError(ApiError):
    """HTTP 5xx response."""


class ApiTimeoutError(ApiError):
    """The server did not answer in time."""


class ApiConnectionError(ApiError):
    """The server could not be reached (DNS, refused, reset)."""


class ApiEmptyResponseError(ApiError):
    """2xx status but an empty body where a post was expected."""

    def __init__(self, *, context: Optional[str] = None) -> None:
        super().__init__("No data received", context=context)


class ApiDecodeError(ApiError):
    """Response body is not JSON or does not look like a post."""


class ApiEncodeError(ApiError):
    """Outgoing request body could not be serialized to JSON."""


def parse_error_payload(resp: Any) -> Any:
    """Return the JSON body of an error response, or a text snippet."""
    try:
        return resp.json()
    except ValueError:
        text = (getattr(resp, "text", "") or "").strip()
        return text[:_SNIPPET_LIMIT] or None


def extract_error_hint(payload: Any) -> Optional[str]:
    """First human-readable string found in an error payload.

    jsonplaceholder answers most errors with ``{}``, so ``None`` is the
    common result.
    """
    if isinstance(payload, str):
        return payload.strip()[:_SNIPPET_LIMIT] or None
    if isinstance(payload, dict):
        for key in _DETAIL_KEYS:
            hint = extract_error_hint(payload.get(key))
            if hint:
                return hint
        return None
    if isinstance(payload, list):
        for item in payload:
            hint = extract_error_hint(item)
            if hint:
                return hint
    return None


def build_error_message(ctx: str, status: int, payload: Any) -> str:
    detail = extract_error_hint(payload)
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


__all__ = [
    "ApiClientError",
    "ApiConnectionError",
    "ApiDecodeError",
    "ApiEmptyResponseError",
    "ApiEncodeError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "build_error_message",
    "extract_error_hint",
    "parse_error_payload",
]
