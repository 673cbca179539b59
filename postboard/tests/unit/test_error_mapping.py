from __future__ import annotations

import pytest

from postboard.adapters.api_errors import (
    ApiClientError,
    ApiConnectionError,
    ApiDecodeError,
    ApiEncodeError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
)
from postboard.domain.ports import UseCaseError
from postboard.usecases.error_mapping import map_api_error


@pytest.mark.parametrize(
    "exc, code",
    [
        (ApiTimeoutError("t"), "REQUEST_TIMEOUT"),
        (ApiConnectionError("refused"), "CONNECTION_FAILED"),
        (ApiDecodeError("bad json"), "DECODE_FAILED"),
        (ApiEncodeError("bad body"), "ENCODE_FAILED"),
        (ApiClientError("x", status=404), "NOT_FOUND"),
        (ApiClientError("x", status=400, hint="title missing"), "REQUEST_FAILED"),
        (ApiServerError("x", status=500), "SERVER_ERROR"),
        (ApiError("weird"), "API_ERROR"),
        (ValueError("boom"), "FALLBACK"),
    ],
)
def test_map_api_error_codes(exc: Exception, code: str) -> None:
    mapped = map_api_error(exc, default_code="FALLBACK")

    assert mapped.code == code
    assert mapped.message


def test_client_error_message_includes_hint() -> None:
    mapped = map_api_error(
        ApiClientError("x", status=400, hint="title missing"),
        default_code="FALLBACK",
    )

    assert mapped.message == "Request failed (HTTP 400): title missing"


def test_use_case_errors_pass_through() -> None:
    original = UseCaseError("CUSTOM", "Custom message")

    assert map_api_error(original, default_code="FALLBACK") is original


def test_unknown_error_without_text_uses_default_message() -> None:
    mapped = map_api_error(RuntimeError(), default_code="FALLBACK", default_message="Oops.")

    assert mapped.message == "Oops."


def test_unknown_error_text_wins_over_default_message() -> None:
    mapped = map_api_error(RuntimeError("disk full"), default_code="FALLBACK", default_message="Oops.")

    assert mapped.code == "FALLBACK"
    assert mapped.message == "disk full"


def test_connection_failure_keeps_platform_description() -> None:
    exc = ApiConnectionError("Could not reach http://api/posts: Name or service not known")

    mapped = map_api_error(exc, default_code="FALLBACK")

    assert mapped.code == "CONNECTION_FAILED"
    assert mapped.message == "Could not reach http://api/posts: Name or service not known"
