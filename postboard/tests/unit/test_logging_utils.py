from __future__ import annotations

import logging

import pytest

from postboard.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_levels(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(logging_utils.LEVEL_ENV, raising=False)
    monkeypatch.delenv(logging_utils.DEBUG_ENV, raising=False)
    root = logging.getLogger()
    urllib3 = logging.getLogger("urllib3")
    saved = (root.level, urllib3.level)
    yield
    root.setLevel(saved[0])
    urllib3.setLevel(saved[1])


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", logging.DEBUG), ("15", 15), ("", logging.INFO), ("chatty", logging.INFO), (logging.ERROR, logging.ERROR)],
)
def test_parse_level(raw, expected) -> None:
    assert logging_utils.parse_level(raw) == expected


def test_preference_toggles_debug_and_quiets_urllib3() -> None:
    assert logging_utils.apply_preferences(True) == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.DEBUG

    assert logging_utils.apply_preferences(False) == logging.INFO
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_environment_overrides_preference(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(logging_utils.DEBUG_ENV, "yes")
    assert logging_utils.env_requests_debug() is True
    assert logging_utils.apply_preferences(False) == logging.DEBUG

    monkeypatch.setenv(logging_utils.LEVEL_ENV, "WARNING")
    assert logging_utils.configure_root(logging.DEBUG) == logging.WARNING
    assert logging_utils.env_requests_debug() is False
