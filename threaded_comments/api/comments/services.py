# threaded_comments/api/comments/services.py

import logging
import uuid
from dataclasses import replace
from typing import Optional

from marshmallow import ValidationError

from threaded_comments.core.config import Config
from threaded_comments.core.exceptions import NotFoundError
from threaded_comments.models.comment import Comment
from threaded_comments.services.comment_store import CommentStore
from threaded_comments.utils.comment_tree import CommentTree, build_comment_tree
from threaded_comments.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)


class CommentService:
    """
    Business logic for comments.
    - Builds the threaded view from the flat store.
    - Creates root comments and replies.
    - Toggles likes.
    """
    def __init__(self, store: CommentStore, default_author: str = 'Guest',
                 anonymous_user_id: str = Config.ANONYMOUS_USER_ID):
        self.store = store
        self.default_author = default_author
        self.anonymous_user_id = anonymous_user_id

    def get_comment_tree(self) -> CommentTree:
        """Rebuilds the tree from a snapshot of the store on every call."""
        tree = build_comment_tree(self.store.snapshot())
        if tree.detached_ids:
            logger.warning(
                f"{len(tree.detached_ids)} comment(s) left out of the tree, parent chain unresolved: {tree.detached_ids}"
            )
        return tree

    def _validate_text(self, text: Optional[str]) -> None:
        if not text:
            raise ValidationError({"text": ["Text is required"]})

    def _new_comment(self, text: str, author: Optional[str], parent_id: Optional[str]) -> Comment:
        return Comment(
            comment_id=str(uuid.uuid4()),
            parent_id=parent_id,
            text=text,
            author=author or self.default_author,
            created_at=DateTimeUtils.now(),
            like_count=0
        )

    def create_comment(self, text: Optional[str], author: Optional[str] = None,
                       parent_id: Optional[str] = None) -> Comment:
        """Appends a new root comment, or a child of `parent_id` (not checked)."""
        self._validate_text(text)
        comment = self.store.append(self._new_comment(text, author, parent_id or None))
        logger.info(f"Comment created (id: {comment.comment_id}, parent: {comment.parent_id})")
        return replace(comment)

    def create_reply(self, parent_id: str, text: Optional[str], author: Optional[str] = None) -> Comment:
        """Appends a reply to an existing comment."""
        self._validate_text(text)
        with self.store.locked():
            if self.store.find_by_id(parent_id) is None:
                raise NotFoundError("Parent comment not found", "PARENT_NOT_FOUND")
            reply = self.store.append(self._new_comment(text, author, parent_id))
        logger.info(f"Reply created (id: {reply.comment_id}, parent: {parent_id})")
        return replace(reply)

    def toggle_like(self, comment_id: str, user_id: Optional[str] = None) -> Comment:
        """
        Likes the comment for `user_id`, or removes that like if it exists.
        Without a user id the shared anonymous identity is used.
        The counter never drops below zero.
        """
        user_id = user_id or self.anonymous_user_id
        with self.store.locked():
            comment = self.store.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment not found", "COMMENT_NOT_FOUND")

            likers = self.store.likers(comment_id)
            if user_id in likers:
                likers.discard(user_id)
                comment.like_count = max(0, comment.like_count - 1)
            else:
                likers.add(user_id)
                comment.like_count += 1
            updated = replace(comment)

        logger.debug(f"Like toggled (id: {comment_id}, user: {user_id}, likes: {updated.like_count})")
        return updated
