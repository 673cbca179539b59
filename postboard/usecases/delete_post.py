from __future__ import annotations
from dataclasses import dataclass
from ..domain.ports import PostId, PostPort, UseCaseError
from .error_mapping import map_api_error


@dataclass
class DeletePost:
    post_port: PostPort

    def __call__(self, post_id: PostId) -> None:
        try:
            self.post_port.delete_post(post_id)
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(
                exc,
                default_code="DELETE_FAILED",
                default_message="Deleting the post failed.",
            ) from exc
