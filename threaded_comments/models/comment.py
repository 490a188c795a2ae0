# threaded_comments/models/comment.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from threaded_comments.utils.datetime_utils import DateTimeUtils


@dataclass
class Comment:
    """
    A single record of the flat comment store.
    `parent_id` is None for root comments. Replies are never stored on the
    record itself; the nested view is rebuilt on read.
    """
    comment_id: str
    text: str
    author: str
    parent_id: Optional[str] = None
    like_count: int = 0
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
