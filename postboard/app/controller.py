"""Adapter and use-case wiring for the app runtimes.

This module owns lazy construction of the posts adapter and the four CRUD
use cases from values in :class:`postboard.viewmodels.settings_vm.SettingsVM`.
Both the Tk app and the NiceGUI runtime call ``build_store`` once per screen
host.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..adapters.posts_memory import InMemoryPostsAdapter
from ..adapters.posts_rest import PostsRestAdapter
from ..adapters.storage_local import StorageLocal
from ..domain.ports import PostPort
from ..usecases.create_post import CreatePost
from ..usecases.delete_post import DeletePost
from ..usecases.fetch_posts import FetchPosts
from ..usecases.update_post import UpdatePost
from ..viewmodels.post_store import Dispatcher, PostStoreVM
from ..viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)


class AppController:
    """Create and cache the runtime adapter/use-cases from settings state."""

    def __init__(self, settings_vm: SettingsVM) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings state containing the API base URL, timeout,
                retry count, and offline flag used to build the adapter.
        """
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm
        self._post_adapter: Optional[PostPort] = None
        self.uc_fetch: Optional[FetchPosts] = None
        self.uc_create: Optional[CreatePost] = None
        self.uc_update: Optional[UpdatePost] = None
        self.uc_delete: Optional[DeletePost] = None

    @property
    def post_adapter(self) -> Optional[PostPort]:
        return self._post_adapter

    def reset(self) -> None:
        """Drop cached adapter and use-cases so the next build uses new settings."""
        self._post_adapter = None
        self.uc_fetch = None
        self.uc_create = None
        self.uc_update = None
        self.uc_delete = None

    def ensure_ready(self) -> bool:
        """Build the adapter and use cases if not cached yet.

        Returns:
            ``True`` once everything is wired.

        Raises:
            ValueError: If the configured base URL is rejected by the adapter.
        """
        if self._post_adapter is not None:
            return True
        settings = self.settings_vm
        if settings.offline:
            self._log.info("Using in-memory posts (offline mode)")
            adapter: PostPort = InMemoryPostsAdapter()
        else:
            self._log.info("Using posts API at %s", settings.base_url)
            adapter = PostsRestAdapter(
                settings.base_url,
                request_timeout_s=settings.request_timeout_s,
                retries=settings.retries,
            )
        self._post_adapter = adapter
        self.uc_fetch = FetchPosts(adapter)
        self.uc_create = CreatePost(adapter)
        self.uc_update = UpdatePost(adapter)
        self.uc_delete = DeletePost(adapter)
        return True

    def build_store(self, dispatcher: Dispatcher) -> PostStoreVM:
        """Return a store wired to the cached use cases."""
        self.ensure_ready()
        return PostStoreVM(
            dispatcher,
            fetch=self.uc_fetch,
            create=self.uc_create,
            update=self.uc_update,
            delete=self.uc_delete,
        )


def load_settings_vm(
    *,
    storage_root: Optional[str] = None,
    base_url: Optional[str] = None,
    offline: Optional[bool] = None,
) -> SettingsVM:
    """Resolve settings: CLI overrides > env > ``user_settings.json`` > defaults.

    Environment:
        POSTBOARD_STORAGE_ROOT: directory holding ``user_settings.json``.
        POSTBOARD_BASE_URL: API root overriding the stored value.
    """
    root = storage_root or os.environ.get("POSTBOARD_STORAGE_ROOT") or "."
    settings_vm = SettingsVM()
    settings_vm.apply_dict(StorageLocal(root_dir=root).load_user_settings())
    env_url = os.environ.get("POSTBOARD_BASE_URL")
    if env_url:
        settings_vm.base_url = env_url
    if base_url:
        settings_vm.base_url = base_url
    if offline is not None:
        settings_vm.offline = offline
    LOGGER.debug("Resolved settings: %s", settings_vm.to_dict())
    return settings_vm


__all__ = ["AppController", "load_settings_vm"]
