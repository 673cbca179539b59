from __future__ import annotations

from typing import Callable, Optional

from postboard.domain.entities import Post

from .post_store import PostStoreVM


class PostFormVM:
    """Add/edit form state. Keeps two text fields, no I/O here.

    Edit mode is selected by passing the post being edited; the fields are
    seeded from it. Submitting hands the fields to the store and dismisses the
    form without waiting for the network result.
    """

    def __init__(
        self,
        store: PostStoreVM,
        post: Optional[Post] = None,
        *,
        on_dismiss: Optional[Callable[[], None]] = None,
    ) -> None:
        self._store = store
        self.post = post
        self.on_dismiss = on_dismiss
        self.title: str = post.title if post is not None else ""
        self.body: str = post.body if post is not None else ""

    @property
    def is_edit(self) -> bool:
        return self.post is not None

    @property
    def header(self) -> str:
        return "Edit Post" if self.is_edit else "New Post"

    @property
    def submit_label(self) -> str:
        return "Save Changes" if self.is_edit else "Add Post"

    def set_title(self, value: str) -> None:
        self.title = "" if value is None else str(value)

    def set_body(self, value: str) -> None:
        self.body = "" if value is None else str(value)

    def is_valid(self) -> bool:
        return self.title != "" and self.body != ""

    def cmd_submit(self) -> bool:
        """Send the form to the store and dismiss.

        Returns:
            ``False`` (form stays open) when a field is empty, else ``True``.
        """
        if not self.is_valid():
            return False
        if self.post is not None:
            self._store.update_post(self.post.id, self.title, self.body)
        else:
            self._store.create_post(self.title, self.body)
        self._dismiss()
        return True

    def cmd_cancel(self) -> None:
        self._dismiss()

    def _dismiss(self) -> None:
        if self.on_dismiss:
            self.on_dismiss()


__all__ = ["PostFormVM"]
