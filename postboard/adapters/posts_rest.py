"""REST adapter for the jsonplaceholder-style ``/posts`` collection.

Implements ``PostPort`` by mapping each CRUD verb to exactly one HTTP request
through :class:`postboard.adapters.http_client.RetryingSession`.
"""

from __future__ import annotations

import logging
from typing import Any, List

import requests

from postboard.domain.entities import Post, PostDraft
from postboard.domain.ports import PostId, PostPort

from .api_errors import (
    ApiClientError,
    ApiDecodeError,
    ApiEmptyResponseError,
    ApiError,
    ApiServerError,
    build_error_message,
    extract_error_hint,
    parse_error_payload,
)
from .http_client import HttpConfig, RetryingSession

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
COLLECTION_PATH = "/posts"

LOGGER = logging.getLogger(__name__)


class PostsRestAdapter(PostPort):
    """REST adapter that exposes list/create/update/delete for posts."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        request_timeout_s: int = 10,
        retries: int = 0,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("PostsRestAdapter requires a base URL")
        if retries < 0:
            raise ValueError(f"retries must be >= 0, got {retries}")
        self.base_url = base_url.strip().rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(self.cfg)

    def list_posts(self) -> List[Post]:
        url = self._make_url(COLLECTION_PATH)
        resp = self.session.get(url)
        self._ensure_ok(resp, "list_posts")
        data = self._json_any(resp, "list_posts")
        if not isinstance(data, list):
            raise ApiDecodeError("list_posts: expected list response", context="list_posts")
        return [self._decode_post(entry, "list_posts") for entry in data]

    def create_post(self, draft: PostDraft) -> Post:
        url = self._make_url(COLLECTION_PATH)
        resp = self.session.post(url, json_body=draft.to_payload())
        self._ensure_ok(resp, "create_post")
        post = self._decode_post(self._json_any(resp, "create_post"), "create_post")
        LOGGER.debug("Created post id=%s", post.id)
        return post

    def update_post(self, post_id: PostId, draft: PostDraft) -> Post:
        ctx = f"update_post[{post_id}]"
        url = self._make_url(f"{COLLECTION_PATH}/{int(post_id)}")
        resp = self.session.put(url, json_body=draft.to_payload())
        self._ensure_ok(resp, ctx)
        return self._decode_post(self._json_any(resp, ctx), ctx)

    def delete_post(self, post_id: PostId) -> None:
        """Delete one post; any HTTP answer counts as done.

        Only transport failures raise. A non-2xx status is logged and the
        body ignored, so callers drop the post locally either way.
        """
        ctx = f"delete_post[{post_id}]"
        url = self._make_url(f"{COLLECTION_PATH}/{int(post_id)}")
        resp = self.session.delete(url)
        if not 200 <= resp.status_code < 300:
            LOGGER.warning("%s: server answered HTTP %s", ctx, resp.status_code)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _make_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        payload = parse_error_payload(resp)
        message = build_error_message(ctx, status, payload)
        hint = extract_error_hint(payload)
        if 400 <= status < 500:
            raise ApiClientError(
                message,
                status=status,
                hint=hint,
                payload=payload,
                context=ctx,
            )
        if 500 <= status < 600:
            raise ApiServerError(
                message,
                status=status,
                payload=payload,
                context=ctx,
            )
        raise ApiError(message, status=status, payload=payload, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        if not resp.content:
            raise ApiEmptyResponseError(context=ctx)
        try:
            return resp.json()
        except ValueError as exc:
            snippet = (getattr(resp, "text", "") or "")[:400]
            raise ApiDecodeError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from exc

    @staticmethod
    def _decode_post(payload: Any, ctx: str) -> Post:
        try:
            return Post.from_payload(payload)
        except ValueError as exc:
            raise ApiDecodeError(f"{ctx}: {exc}", payload=payload, context=ctx) from exc


__all__ = ["COLLECTION_PATH", "DEFAULT_BASE_URL", "PostsRestAdapter"]
