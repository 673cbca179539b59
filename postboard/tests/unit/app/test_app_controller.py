from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, List

import pytest

from postboard.adapters.posts_memory import InMemoryPostsAdapter
from postboard.adapters.posts_rest import PostsRestAdapter
from postboard.app.controller import AppController, load_settings_vm
from postboard.viewmodels.settings_vm import SettingsVM


class _InlineDispatcher:
    def submit(self, work: Callable[[], Any], *, on_success, on_error, label: str = "task") -> None:
        try:
            result = work()
        except Exception as exc:
            on_error(exc)
        else:
            on_success(result)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("POSTBOARD_BASE_URL", "POSTBOARD_STORAGE_ROOT", "POSTBOARD_LOG_LEVEL", "POSTBOARD_DEBUG"):
        monkeypatch.delenv(name, raising=False)


def test_offline_builds_in_memory_adapter() -> None:
    settings = SettingsVM()
    settings.offline = True
    controller = AppController(settings)

    store = controller.build_store(_InlineDispatcher())
    store.fetch_posts()

    assert isinstance(controller.post_adapter, InMemoryPostsAdapter)
    assert len(store.posts) == 100
    store.create_post("X", "Y")
    assert store.posts[-1].id == 101


def test_online_builds_rest_adapter_from_settings() -> None:
    settings = SettingsVM()
    settings.apply_dict({"base_url": "http://localhost:3000/", "request_timeout_s": 3, "retries": 2})
    controller = AppController(settings)

    controller.ensure_ready()

    adapter = controller.post_adapter
    assert isinstance(adapter, PostsRestAdapter)
    assert adapter.base_url == "http://localhost:3000"
    assert adapter.cfg.request_timeout_s == 3
    assert adapter.cfg.retries == 2


def test_reset_rebuilds_with_new_settings() -> None:
    settings = SettingsVM()
    controller = AppController(settings)
    controller.ensure_ready()
    first = controller.post_adapter

    settings.offline = True
    controller.ensure_ready()
    assert controller.post_adapter is first

    controller.reset()
    controller.ensure_ready()
    assert isinstance(controller.post_adapter, InMemoryPostsAdapter)


def test_load_settings_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "user_settings.json").write_text(
        json.dumps({"base_url": "http://stored.example", "retries": 1}), encoding="utf-8"
    )
    monkeypatch.setenv("POSTBOARD_STORAGE_ROOT", str(tmp_path))

    stored = load_settings_vm()
    assert stored.base_url == "http://stored.example"
    assert stored.retries == 1

    monkeypatch.setenv("POSTBOARD_BASE_URL", "http://env.example/")
    from_env = load_settings_vm()
    assert from_env.base_url == "http://env.example"

    from_cli = load_settings_vm(base_url="https://cli.example", offline=True)
    assert from_cli.base_url == "https://cli.example"
    assert from_cli.offline is True
    assert from_cli.retries == 1


def test_load_settings_without_file_uses_defaults(tmp_path: Path) -> None:
    settings = load_settings_vm(storage_root=str(tmp_path))

    assert settings.base_url == "https://jsonplaceholder.typicode.com"
    assert settings.offline is False


def test_load_settings_rejects_unknown_keys(tmp_path: Path) -> None:
    (tmp_path / "user_settings.json").write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_settings_vm(storage_root=str(tmp_path))


def test_store_reports_errors_from_rest_wiring(monkeypatch: pytest.MonkeyPatch) -> None:
    settings = SettingsVM()
    controller = AppController(settings)
    store = controller.build_store(_InlineDispatcher())
    calls: List[str] = []

    def _fail() -> List[Any]:
        calls.append("list")
        raise ConnectionError("offline")

    monkeypatch.setattr(controller.post_adapter, "list_posts", _fail)
    store.fetch_posts()

    assert calls == ["list"]
    assert store.posts == []
    assert store.error_message == "offline"


class _Response:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.text = json.dumps(payload)
        self.content = self.text.encode("utf-8")
        self.status_code = status_code

    def json(self) -> Any:
        return json.loads(self.text)


class _Session:
    def __init__(self, *responses: _Response) -> None:
        self._responses = list(responses)

    def get(self, url: str, **kwargs: Any) -> _Response:
        return self._responses.pop(0)

    def delete(self, url: str, **kwargs: Any) -> _Response:
        return self._responses.pop(0)


def test_delete_answered_with_404_still_removes_post() -> None:
    controller = AppController(SettingsVM())
    store = controller.build_store(_InlineDispatcher())
    controller.post_adapter.session.session = _Session(  # type: ignore[union-attr]
        _Response([{"id": 1, "title": "A", "body": "B"}, {"id": 2, "title": "C", "body": "D"}]),
        _Response({}, 404),
    )

    store.fetch_posts()
    store.delete_post(2)

    assert [post.id for post in store.posts] == [1]
    assert store.error_message is None
