"""Domain package exports for value objects and port protocols."""

from .entities import PLACEHOLDER_USER_ID, Post, PostDraft
from .ports import PostId, PostPort, StoragePort, UseCaseError

__all__ = [
    "PLACEHOLDER_USER_ID",
    "Post",
    "PostDraft",
    "PostId",
    "PostPort",
    "StoragePort",
    "UseCaseError",
]
