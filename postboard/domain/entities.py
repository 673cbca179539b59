from __future__ import annotations

"""Domain value objects exchanged between adapters, use-cases, and view models."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

PLACEHOLDER_USER_ID = 1
"""Author id sent with every write; there is no session/user concept yet."""


@dataclass(frozen=True)
class Post:
    """A post resource as returned by the API and rendered by the UI."""

    id: int
    """Server-assigned identifier, unique within the store collection."""

    title: str
    """User-editable headline."""

    body: str
    """User-editable text content."""

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError("Post.id must be an integer.")
        if not isinstance(self.title, str):
            raise ValueError("Post.title must be a string.")
        if not isinstance(self.body, str):
            raise ValueError("Post.body must be a string.")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Post":
        """Build a post from a decoded JSON object.

        Keys other than ``id``, ``title`` and ``body`` (for example ``userId``)
        are ignored.

        Raises:
            ValueError: If the payload is not an object or a field is missing
                or has the wrong type.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Expected post object, got {type(payload).__name__}.")
        missing = [key for key in ("id", "title", "body") if key not in payload]
        if missing:
            raise ValueError(f"Post payload missing keys: {', '.join(missing)}")
        return cls(id=payload["id"], title=payload["title"], body=payload["body"])


@dataclass(frozen=True)
class PostDraft:
    """Outgoing write body for create and update requests."""

    title: str
    body: str
    user_id: int = PLACEHOLDER_USER_ID

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON object sent to the collection endpoint."""
        return {"title": self.title, "body": self.body, "userId": self.user_id}


__all__ = ["PLACEHOLDER_USER_ID", "Post", "PostDraft"]
