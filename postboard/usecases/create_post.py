"""Use case for creating a post from form fields."""

from __future__ import annotations

from dataclasses import dataclass

from postboard.domain.entities import PLACEHOLDER_USER_ID, Post, PostDraft
from postboard.domain.ports import PostPort, UseCaseError
from postboard.usecases.error_mapping import map_api_error


@dataclass
class CreatePost:
    """Send a new post to the collection endpoint and return the stored copy."""

    post_port: PostPort
    user_id: int = PLACEHOLDER_USER_ID

    def __call__(self, title: str, body: str) -> Post:
        draft = PostDraft(title=title, body=body, user_id=self.user_id)
        try:
            return self.post_port.create_post(draft)
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(
                exc,
                default_code="CREATE_FAILED",
                default_message="Creating the post failed.",
            ) from exc


__all__ = ["CreatePost"]
