"""Use case for replacing the title/body of an existing post."""

from __future__ import annotations

from dataclasses import dataclass

from postboard.domain.entities import PLACEHOLDER_USER_ID, Post, PostDraft
from postboard.domain.ports import PostId, PostPort, UseCaseError
from postboard.usecases.error_mapping import map_api_error


@dataclass
class UpdatePost:
    post_port: PostPort
    user_id: int = PLACEHOLDER_USER_ID

    def __call__(self, post_id: PostId, title: str, body: str) -> Post:
        draft = PostDraft(title=title, body=body, user_id=self.user_id)
        try:
            return self.post_port.update_post(post_id, draft)
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(
                exc,
                default_code="UPDATE_FAILED",
                default_message="Saving the post failed.",
            ) from exc


__all__ = ["UpdatePost"]
