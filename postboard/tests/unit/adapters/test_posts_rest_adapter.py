from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

import pytest

from postboard.adapters.api_errors import (
    ApiClientError,
    ApiDecodeError,
    ApiEmptyResponseError,
    ApiServerError,
)
from postboard.adapters.posts_rest import PostsRestAdapter
from postboard.domain.entities import Post, PostDraft


class _ResponseStub:
    def __init__(self, payload: Any = None, status_code: int = 200, *, raw: Optional[str] = None) -> None:
        if raw is None:
            raw = "" if payload is None else json.dumps(payload)
        self.text = raw
        self.content = raw.encode("utf-8")
        self.status_code = status_code

    def json(self) -> Any:
        return json.loads(self.text)


class _SessionStub:
    def __init__(self, responses: Sequence[_ResponseStub]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def _record(self, method: str, url: str, **kwargs: Any) -> _ResponseStub:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        return self._responses.pop(0)

    def get(self, url: str, **kwargs: Any) -> _ResponseStub:
        return self._record("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> _ResponseStub:
        return self._record("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> _ResponseStub:
        return self._record("PUT", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> _ResponseStub:
        return self._record("DELETE", url, **kwargs)


def _adapter(responses: Sequence[_ResponseStub]) -> tuple[PostsRestAdapter, _SessionStub]:
    adapter = PostsRestAdapter("https://api.example/")
    stub = _SessionStub(responses)
    adapter.session.session = stub  # type: ignore[assignment]
    return adapter, stub


def test_list_posts_uses_collection_endpoint_and_keeps_order() -> None:
    payload = [
        {"userId": 1, "id": 2, "title": "C", "body": "D"},
        {"userId": 1, "id": 1, "title": "A", "body": "B"},
    ]
    adapter, stub = _adapter([_ResponseStub(payload)])

    posts = adapter.list_posts()

    assert posts == [Post(2, "C", "D"), Post(1, "A", "B")]
    call = stub.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://api.example/posts"
    assert call["headers"]["Accept"] == "application/json"
    assert "Content-Type" not in call["headers"]
    assert call["timeout"] == 10


def test_create_post_sends_json_body_with_user_id() -> None:
    adapter, stub = _adapter([_ResponseStub({"id": 101, "title": "X", "body": "Y", "userId": 1}, 201)])

    post = adapter.create_post(PostDraft(title="X", body="Y"))

    assert post == Post(101, "X", "Y")
    call = stub.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://api.example/posts"
    assert call["headers"]["Content-Type"] == "application/json"
    assert json.loads(call["data"]) == {"title": "X", "body": "Y", "userId": 1}


def test_update_post_puts_to_item_endpoint() -> None:
    adapter, stub = _adapter([_ResponseStub({"id": 1, "title": "Z", "body": "W"})])

    post = adapter.update_post(1, PostDraft(title="Z", body="W"))

    assert post == Post(1, "Z", "W")
    assert stub.calls[0]["method"] == "PUT"
    assert stub.calls[0]["url"] == "https://api.example/posts/1"
    assert json.loads(stub.calls[0]["data"])["userId"] == 1


def test_delete_post_ignores_response_body() -> None:
    adapter, stub = _adapter([_ResponseStub(raw="")])

    assert adapter.delete_post(2) is None
    assert stub.calls[0]["method"] == "DELETE"
    assert stub.calls[0]["url"] == "https://api.example/posts/2"


def test_empty_body_raises_no_data() -> None:
    adapter, _ = _adapter([_ResponseStub(raw="")])

    with pytest.raises(ApiEmptyResponseError) as excinfo:
        adapter.list_posts()

    assert "No data received" in str(excinfo.value)


def test_invalid_json_raises_decode_error() -> None:
    adapter, _ = _adapter([_ResponseStub(raw="<html>oops</html>")])

    with pytest.raises(ApiDecodeError):
        adapter.create_post(PostDraft(title="X", body="Y"))


def test_unexpected_shape_raises_decode_error() -> None:
    adapter, _ = _adapter([_ResponseStub({"id": 1, "title": "A", "body": "B"})])

    with pytest.raises(ApiDecodeError) as excinfo:
        adapter.list_posts()

    assert "expected list" in str(excinfo.value)


def test_item_missing_fields_raises_decode_error() -> None:
    adapter, _ = _adapter([_ResponseStub([{"id": 1, "title": "A"}])])

    with pytest.raises(ApiDecodeError):
        adapter.list_posts()


def test_client_error_status_is_typed() -> None:
    adapter, _ = _adapter([_ResponseStub({"message": "missing"}, 404)])

    with pytest.raises(ApiClientError) as excinfo:
        adapter.update_post(999, PostDraft(title="A", body="B"))

    assert excinfo.value.status == 404
    assert "HTTP 404" in str(excinfo.value)


def test_server_error_status_is_typed() -> None:
    adapter, _ = _adapter([_ResponseStub(raw="boom", status_code=503)])

    with pytest.raises(ApiServerError) as excinfo:
        adapter.list_posts()

    assert excinfo.value.status == 503


@pytest.mark.parametrize("status", [404, 500])
def test_delete_post_completes_on_error_status(status: int) -> None:
    adapter, stub = _adapter([_ResponseStub({"message": "gone"}, status)])

    assert adapter.delete_post(2) is None
    assert len(stub.calls) == 1


def test_adapter_rejects_negative_retries() -> None:
    with pytest.raises(ValueError):
        PostsRestAdapter("https://api.example", retries=-1)


def test_adapter_rejects_blank_base_url() -> None:
    with pytest.raises(ValueError):
        PostsRestAdapter("   ")
