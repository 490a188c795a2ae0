# threaded_comments/api/comments/test_comment_service.py
import logging
import threading

import pytest
from marshmallow import ValidationError

from threaded_comments.api.comments.services import CommentService
from threaded_comments.core.exceptions import NotFoundError
from threaded_comments.models.comment import Comment
from threaded_comments.services.comment_store import CommentStore


@pytest.fixture
def service():
    store = CommentStore([Comment(comment_id="1", text="First!", author="Alice")])
    return CommentService(store, default_author="Guest")


def test_toggle_like_is_involutive(service):
    assert service.toggle_like("1", "u1").like_count == 1
    assert service.toggle_like("1", "u1").like_count == 0


def test_likes_are_counted_per_identity(service):
    service.toggle_like("1", "u1")
    service.toggle_like("1", "u2")
    assert service.toggle_like("1", "u3").like_count == 3
    assert service.toggle_like("1", "u2").like_count == 2


def test_anonymous_identity_is_shared(service):
    """Requests without a user all toggle the same like entry."""
    assert service.toggle_like("1").like_count == 1
    assert service.toggle_like("1").like_count == 0


def test_concurrent_toggles_are_serialized(service):
    # Each user toggles an odd number of times, so every one ends up liking
    def worker(user_id):
        for _ in range(101):
            service.toggle_like("1", user_id)

    threads = [threading.Thread(target=worker, args=(f"u{n}",)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert service.store.find_by_id("1").like_count == 8
    assert len(service.store.likers("1")) == 8


def test_anonymous_identity_is_configurable():
    store = CommentStore([Comment(comment_id="1", text="First!", author="Alice")])
    service = CommentService(store, anonymous_user_id="guest-liker")
    service.toggle_like("1")
    assert store.likers("1") == {"guest-liker"}


def test_like_count_never_goes_negative(service):
    service.toggle_like("1", "u1")
    # Counter and like set out of sync: the unlike must stop at zero
    service.store.find_by_id("1").like_count = 0
    assert service.toggle_like("1", "u1").like_count == 0


def test_toggle_like_unknown_comment(service):
    with pytest.raises(NotFoundError):
        service.toggle_like("999", "u1")
    assert service.store.likers("1") == set()


def test_toggle_like_returns_a_copy(service):
    updated = service.toggle_like("1", "u1")
    updated.like_count = 100
    assert service.store.find_by_id("1").like_count == 1


def test_create_comment_defaults(service):
    comment = service.create_comment("Hello there")
    assert comment.parent_id is None
    assert comment.author == "Guest"
    assert comment.like_count == 0
    assert comment.created_at.tzinfo is not None
    assert comment.comment_id in service.store


def test_create_comment_empty_author_uses_placeholder(service):
    assert service.create_comment("Hi", author="").author == "Guest"
    assert service.create_comment("Hi", author="Bob").author == "Bob"


def test_create_comment_ids_are_unique(service):
    ids = {service.create_comment(f"comment {i}").comment_id for i in range(50)}
    assert len(ids) == 50


@pytest.mark.parametrize("text", ["", None])
def test_create_comment_requires_text(service, text):
    with pytest.raises(ValidationError):
        service.create_comment(text)
    assert len(service.store) == 1


def test_create_comment_does_not_check_parent(service):
    comment = service.create_comment("Floating", parent_id="missing")
    assert comment.parent_id == "missing"
    assert len(service.store) == 2


def test_create_comment_blank_parent_means_root(service):
    assert service.create_comment("Root", parent_id="").parent_id is None


def test_create_reply(service):
    reply = service.create_reply("1", "hi", "Bob")
    assert reply.parent_id == "1"
    assert reply.author == "Bob"

    [root] = service.get_comment_tree().roots()
    assert [child.comment.text for child in root.children] == ["hi"]


def test_create_reply_unknown_parent(service):
    with pytest.raises(NotFoundError):
        service.create_reply("999", "x")
    assert len(service.store) == 1


def test_create_reply_validates_text_before_parent(service):
    with pytest.raises(ValidationError):
        service.create_reply("999", "")
    assert len(service.store) == 1


def test_tree_excludes_dangling_comments_but_store_keeps_them(service, caplog):
    service.create_comment("Lost", parent_id="missing")
    with caplog.at_level(logging.WARNING):
        tree = service.get_comment_tree()

    assert [node.comment.comment_id for node in tree.roots()] == ["1"]
    assert len(tree.detached_ids) == 1
    assert len(service.store) == 2
    assert "left out of the tree" in caplog.text


def test_tree_is_rebuilt_from_a_snapshot(service):
    tree = service.get_comment_tree()
    service.toggle_like("1", "u1")
    assert tree.roots()[0].comment.like_count == 0
    assert service.get_comment_tree().roots()[0].comment.like_count == 1
