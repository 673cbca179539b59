from __future__ import annotations

import pytest

from postboard.domain.entities import PLACEHOLDER_USER_ID, Post, PostDraft


def test_from_payload_ignores_extra_keys() -> None:
    post = Post.from_payload({"userId": 7, "id": 1, "title": "A", "body": "B"})

    assert post == Post(id=1, title="A", body="B")


def test_from_payload_rejects_missing_fields() -> None:
    with pytest.raises(ValueError) as excinfo:
        Post.from_payload({"id": 1, "title": "A"})

    assert "body" in str(excinfo.value)


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "1", "title": "A", "body": "B"},
        {"id": True, "title": "A", "body": "B"},
        {"id": 1, "title": None, "body": "B"},
        ["not", "an", "object"],
    ],
)
def test_from_payload_rejects_wrong_types(payload) -> None:
    with pytest.raises(ValueError):
        Post.from_payload(payload)


def test_draft_payload_carries_placeholder_user() -> None:
    draft = PostDraft(title="X", body="Y")

    assert draft.to_payload() == {"title": "X", "body": "Y", "userId": PLACEHOLDER_USER_ID}
    assert PLACEHOLDER_USER_ID == 1
