"""List-screen projection of ``PostStoreVM`` for ``PostListView``.

Call context:
    The app layer creates one instance per list screen and forwards
    ``PostRow`` objects to the Treeview (Tk) or table (NiceGUI).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from postboard.domain.entities import Post
from postboard.domain.ports import PostId

from .post_store import PostStoreVM


@dataclass
class PostRow:
    """Display row model consumed by the list widgets."""
    post_id: PostId
    title: str
    body: str


class PostListVM:
    """
    Lightweight view-model for the posts list.

    Triggers the initial fetch, resolves row positions (not ids, which may
    repeat) for edit and delete, and forwards add/edit intents to the app layer.
    """

    def __init__(
        self,
        store: PostStoreVM,
        *,
        on_open_create: Optional[Callable[[], None]] = None,
        on_open_edit: Optional[Callable[[Post], None]] = None,
    ) -> None:
        self._store = store
        self.on_open_create = on_open_create
        self.on_open_edit = on_open_edit
        self._appeared = False

    @property
    def error_message(self) -> Optional[str]:
        return self._store.error_message

    def rows(self) -> List[PostRow]:
        """Return rows in store order."""
        return [PostRow(post_id=post.id, title=post.title, body=post.body) for post in self._store.posts]

    def on_appear(self) -> None:
        """Fetch posts the first time the screen is shown; later calls are ignored."""
        if self._appeared:
            return
        self._appeared = True
        self._store.fetch_posts()

    def cmd_refresh(self) -> None:
        self._store.fetch_posts()

    def cmd_add(self) -> None:
        if self.on_open_create:
            self.on_open_create()

    def cmd_edit_at(self, index: int) -> None:
        """Open the form for the post shown at row ``index``; out of range is ignored."""
        snapshot = self._store.posts
        if not 0 <= index < len(snapshot) or not self.on_open_edit:
            return
        self.on_open_edit(snapshot[index])

    def cmd_delete_at(self, indexes: Iterable[int]) -> List[PostId]:
        """Delete the posts at the given row positions.

        Positions are resolved to ids against a single snapshot before any
        request is issued. Out-of-range positions are skipped, and one request
        is issued per distinct id since a delete removes every match.

        Returns:
            The ids for which a delete request was issued.
        """
        snapshot = self._store.posts
        ids: List[PostId] = []
        for index in sorted(set(indexes)):
            if 0 <= index < len(snapshot) and snapshot[index].id not in ids:
                ids.append(snapshot[index].id)
        for post_id in ids:
            self._store.delete_post(post_id)
        return ids

    def cmd_dismiss_error(self) -> None:
        self._store.dismiss_error()


__all__ = ["PostListVM", "PostRow"]
