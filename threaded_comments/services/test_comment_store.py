# threaded_comments/services/test_comment_store.py
import threading

import pytest

from threaded_comments.models.comment import Comment
from threaded_comments.services.comment_store import CommentStore
from threaded_comments.services.demo_data import demo_comments


def make(comment_id, parent_id=None):
    return Comment(comment_id=comment_id, text="hello", author="tester", parent_id=parent_id)


def test_append_keeps_insertion_order():
    store = CommentStore()
    for cid in ["b", "a", "c"]:
        store.append(make(cid))
    assert [c.comment_id for c in store.all()] == ["b", "a", "c"]
    assert len(store) == 3


def test_duplicate_id_is_rejected():
    store = CommentStore([make("1")])
    with pytest.raises(ValueError):
        store.append(make("1"))
    assert len(store) == 1


def test_find_by_id():
    store = CommentStore([make("1")])
    assert store.find_by_id("1").comment_id == "1"
    assert store.find_by_id("nope") is None
    assert "1" in store
    assert "nope" not in store


def test_all_is_lazy_and_restartable():
    store = CommentStore([make("1"), make("2")])
    first = store.all()
    second = store.all()
    assert next(first).comment_id == "1"
    assert [c.comment_id for c in second] == ["1", "2"]
    assert [c.comment_id for c in first] == ["2"]


def test_all_copies_on_first_read():
    store = CommentStore([make("1")])
    records = store.all()
    store.append(make("2"))
    assert [c.comment_id for c in records] == ["1", "2"]

    started = store.all()
    next(started)
    store.append(make("3"))
    assert list(started) == [store.find_by_id("2")]


def test_snapshot_is_detached_from_live_records():
    store = CommentStore([make("1")])
    snapshot = store.snapshot()
    store.find_by_id("1").like_count = 7
    assert snapshot[0].like_count == 0


def test_likers_set_is_per_comment():
    store = CommentStore([make("1"), make("2")])
    store.likers("1").add("u1")
    assert store.likers("1") == {"u1"}
    assert store.likers("2") == set()


def test_concurrent_appends_are_not_lost():
    store = CommentStore()

    def worker(prefix):
        for i in range(200):
            store.append(make(f"{prefix}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1600


def test_demo_data_shape():
    comments = demo_comments()
    assert [c.comment_id for c in comments] == ["1", "2", "3", "4", "5"]
    assert [c.parent_id for c in comments] == [None, None, "1", "1", "3"]
    assert [c.like_count for c in comments] == [12, 8, 5, 3, 2]
    CommentStore(comments)
