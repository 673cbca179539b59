from __future__ import annotations
from typing import Dict, List, Protocol

from .entities import Post, PostDraft

PostId = int


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class PostPort(Protocol):
    """CRUD operations against the posts collection endpoint."""

    def list_posts(self) -> List[Post]: ...
    def create_post(self, draft: PostDraft) -> Post: ...
    def update_post(self, post_id: PostId, draft: PostDraft) -> Post: ...
    def delete_post(self, post_id: PostId) -> None: ...


class StoragePort(Protocol):
    """Source of persisted user settings."""

    def load_user_settings(self) -> Dict: ...
