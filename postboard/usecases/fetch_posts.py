"""Use case for loading the full posts collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from postboard.domain.entities import Post
from postboard.domain.ports import PostPort, UseCaseError
from postboard.usecases.error_mapping import map_api_error


@dataclass
class FetchPosts:
    """Return every post in the order the server listed them."""

    post_port: PostPort

    def __call__(self) -> List[Post]:
        try:
            return list(self.post_port.list_posts())
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(
                exc,
                default_code="FETCH_FAILED",
                default_message="Loading posts failed.",
            ) from exc


__all__ = ["FetchPosts"]
