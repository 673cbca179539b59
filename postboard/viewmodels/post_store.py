"""Observable post collection shared by the list and form screens.

Call context:
    ``AppController.build_store`` wires one instance per window. Views
    subscribe to change notifications; ``PostListVM`` and ``PostFormVM`` call
    the four commands.

State discipline:
    ``posts`` and ``error_message`` are written only inside continuations that
    the dispatcher runs on the UI thread. Commands return immediately and never
    touch state themselves, so no lock guards the collection.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Protocol, TypeVar

from postboard.domain.entities import Post
from postboard.domain.ports import PostId, UseCaseError
from postboard.usecases.create_post import CreatePost
from postboard.usecases.delete_post import DeletePost
from postboard.usecases.fetch_posts import FetchPosts
from postboard.usecases.update_post import UpdatePost

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)

Listener = Callable[[], None]


class Dispatcher(Protocol):
    """Runs ``work`` off the UI thread and continuations back on it."""

    def submit(
        self,
        work: Callable[[], T],
        *,
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None],
        label: str = ...,
    ) -> Any: ...


class PostStoreVM:
    """Holds the client-side view of the posts collection plus the last error."""

    def __init__(
        self,
        dispatcher: Dispatcher,
        *,
        fetch: FetchPosts,
        create: CreatePost,
        update: UpdatePost,
        delete: DeletePost,
    ) -> None:
        self._dispatcher = dispatcher
        self._uc_fetch = fetch
        self._uc_create = create
        self._uc_update = update
        self._uc_delete = delete
        self._posts: List[Post] = []
        self._error_message: Optional[str] = None
        self._listeners: List[Listener] = []
        self._revision = 0

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------
    @property
    def posts(self) -> List[Post]:
        """Snapshot copy of the collection in display order."""
        return list(self._posts)

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def revision(self) -> int:
        """Counter bumped on every state change, for readers that poll."""
        return self._revision

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def dismiss_error(self) -> None:
        if self._error_message is None:
            return
        self._error_message = None
        self._notify()

    # ------------------------------------------------------------------
    # Commands (fire-and-forget)
    # ------------------------------------------------------------------
    def fetch_posts(self) -> None:
        self._dispatcher.submit(
            self._uc_fetch,
            on_success=self._apply_fetched,
            on_error=self._apply_error,
            label="fetch_posts",
        )

    def create_post(self, title: str, body: str) -> None:
        self._dispatcher.submit(
            lambda: self._uc_create(title, body),
            on_success=self._apply_created,
            on_error=self._apply_error,
            label="create_post",
        )

    def update_post(self, post_id: PostId, title: str, body: str) -> None:
        self._dispatcher.submit(
            lambda: self._uc_update(post_id, title, body),
            on_success=lambda post: self._apply_updated(post_id, post),
            on_error=self._apply_error,
            label=f"update_post[{post_id}]",
        )

    def delete_post(self, post_id: PostId) -> None:
        self._dispatcher.submit(
            lambda: self._uc_delete(post_id),
            on_success=lambda _: self._apply_deleted(post_id),
            on_error=self._apply_error,
            label=f"delete_post[{post_id}]",
        )

    # ------------------------------------------------------------------
    # Continuations (UI thread only)
    # ------------------------------------------------------------------
    def _apply_fetched(self, posts: List[Post]) -> None:
        self._posts = list(posts)
        LOGGER.info("Loaded %d posts", len(self._posts))
        self._notify()

    def _apply_created(self, post: Post) -> None:
        self._posts.append(post)
        self._notify()

    def _apply_updated(self, post_id: PostId, post: Post) -> None:
        for idx, existing in enumerate(self._posts):
            if existing.id == post_id:
                # Identity stays with the local entry even if the server echoes another id.
                self._posts[idx] = Post(id=post_id, title=post.title, body=post.body)
                self._notify()
                return
        LOGGER.warning("Updated post %s is not in the local collection; ignoring", post_id)

    def _apply_deleted(self, post_id: PostId) -> None:
        remaining = [post for post in self._posts if post.id != post_id]
        if len(remaining) == len(self._posts):
            return
        self._posts = remaining
        self._notify()

    def _apply_error(self, exc: Exception) -> None:
        if isinstance(exc, UseCaseError):
            message = exc.message
        else:
            message = str(exc) or exc.__class__.__name__
        LOGGER.warning("Post request failed: %s", message)
        self._error_message = message
        self._notify()

    def _notify(self) -> None:
        self._revision += 1
        for listener in list(self._listeners):
            listener()


__all__ = ["Dispatcher", "Listener", "PostStoreVM"]
