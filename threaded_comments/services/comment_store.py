# threaded_comments/services/comment_store.py
import logging
import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Optional, Set

from threaded_comments.models.comment import Comment

logger = logging.getLogger(__name__)


class CommentStore:
    """
    In-memory flat comment store owned by the application instance.
    - Keeps comments in insertion order plus an id index.
    - Keeps, per comment id, the set of identities that currently like it.

    The Flask server handles requests on several threads, so every mutation of
    the comment list or the like sets must happen inside `locked()`.
    """
    def __init__(self, comments: Iterable[Comment] = ()):
        self._lock = threading.RLock()
        self._comments: List[Comment] = []
        self._index: Dict[str, Comment] = {}
        self._likes: Dict[str, Set[str]] = {}
        for comment in comments:
            self.append(comment)

    @contextmanager
    def locked(self):
        with self._lock:
            yield self

    def append(self, comment: Comment) -> Comment:
        """Adds a record at the end of the flat collection."""
        with self._lock:
            if comment.comment_id in self._index:
                raise ValueError(f"Duplicate comment id: {comment.comment_id}")
            self._comments.append(comment)
            self._index[comment.comment_id] = comment
        logger.debug(f"Comment stored (id: {comment.comment_id}, parent: {comment.parent_id})")
        return comment

    def find_by_id(self, comment_id: str) -> Optional[Comment]:
        """Returns the live record, or None when the id is unknown."""
        with self._lock:
            return self._index.get(comment_id)

    def all(self) -> Iterator[Comment]:
        """
        Lazily yields every record in insertion order.
        Each call starts a new pass. The collection is copied when the first
        record is requested, not when all() is called.
        """
        with self._lock:
            comments = list(self._comments)
        yield from comments

    def snapshot(self) -> List[Comment]:
        """Copies of every record, taken atomically."""
        with self._lock:
            return [replace(comment) for comment in self._comments]

    def likers(self, comment_id: str) -> Set[str]:
        """Mutable set of identities liking the comment; call inside locked()."""
        with self._lock:
            return self._likes.setdefault(comment_id, set())

    def __len__(self) -> int:
        with self._lock:
            return len(self._comments)

    def __contains__(self, comment_id: object) -> bool:
        with self._lock:
            return comment_id in self._index
