from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from postboard.domain.entities import Post, PostDraft
from postboard.domain.ports import PostId, PostPort

from .api_errors import ApiClientError


def seed_posts(count: int = 100) -> List[Post]:
    """Deterministic placeholder posts resembling the public demo API."""
    return [
        Post(id=idx, title=f"Post {idx}", body=f"Placeholder body for post {idx}.")
        for idx in range(1, count + 1)
    ]


@dataclass
class InMemoryPostsAdapter(PostPort):
    """Offline substitute for ``PostsRestAdapter`` with deterministic responses.

    Created posts receive ``max(id) + 1``, so the first post created on the
    default 100-post seed gets id 101 like the public demo API.
    """

    initial: Optional[Iterable[Post]] = None
    _posts: List[Post] = field(init=False, default_factory=list)
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self) -> None:
        self._posts = list(seed_posts() if self.initial is None else self.initial)

    # ---------- PostPort ----------

    def list_posts(self) -> List[Post]:
        with self._lock:
            return list(self._posts)

    def create_post(self, draft: PostDraft) -> Post:
        with self._lock:
            next_id = max((post.id for post in self._posts), default=0) + 1
            post = Post(id=next_id, title=draft.title, body=draft.body)
            self._posts.append(post)
            return post

    def update_post(self, post_id: PostId, draft: PostDraft) -> Post:
        ctx = f"update_post[{post_id}]"
        with self._lock:
            for idx, existing in enumerate(self._posts):
                if existing.id == post_id:
                    updated = Post(id=post_id, title=draft.title, body=draft.body)
                    self._posts[idx] = updated
                    return updated
        raise ApiClientError(f"{ctx}: HTTP 404", status=404, context=ctx)

    def delete_post(self, post_id: PostId) -> None:
        with self._lock:
            self._posts = [post for post in self._posts if post.id != post_id]


__all__ = ["InMemoryPostsAdapter", "seed_posts"]
