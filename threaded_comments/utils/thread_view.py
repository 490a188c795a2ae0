# threaded_comments/utils/thread_view.py
"""
View model for rendering a comment thread.

Pure functions: given the tree roots, the current depth and the set of nodes
whose replies were expanded, produce exactly what the client draws for each
comment (avatar, relative time, reply button, visible replies and the
"more replies" toggle).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Container, List, Optional

from threaded_comments.utils.comment_tree import CommentNode
from threaded_comments.utils.datetime_utils import DateTimeUtils

# Reply forms are not offered below this depth
MAX_REPLY_DEPTH = 3
# Replies shown before "+ N more replies"
COLLAPSED_REPLY_COUNT = 2

AVATAR_COLORS = [
    'bg-red-500',
    'bg-blue-500',
    'bg-green-500',
    'bg-yellow-500',
    'bg-purple-500',
    'bg-pink-500',
    'bg-indigo-500',
    'bg-teal-500',
]


@dataclass
class Avatar:
    letter: str
    color_class: str


@dataclass
class ThreadView:
    comment_id: str
    author: str
    text: str
    likes: int
    time_ago: str
    avatar: Avatar
    depth: int
    can_reply: bool
    replies: List['ThreadView'] = field(default_factory=list)
    hidden_reply_count: int = 0
    toggle_label: Optional[str] = None


def avatar_for(name: str) -> Avatar:
    """First letter of the name on a color picked from its first character."""
    if not name:
        return Avatar(letter='?', color_class=AVATAR_COLORS[0])
    return Avatar(letter=name[0].upper(), color_class=AVATAR_COLORS[ord(name[0]) % len(AVATAR_COLORS)])


def _toggle_label(hidden_count: int, expanded: bool) -> Optional[str]:
    if hidden_count <= 0:
        return None
    if expanded:
        return "Show less"
    return f"+ {hidden_count} more repl{'y' if hidden_count == 1 else 'ies'}"


def render_thread(
    nodes: List[CommentNode],
    expanded: Container[str] = frozenset(),
    depth: int = 0,
    now: Optional[datetime] = None
) -> List[ThreadView]:
    now = now or DateTimeUtils.now()
    views = []
    for node in nodes:
        comment = node.comment
        is_expanded = comment.comment_id in expanded
        hidden_count = max(0, len(node.children) - COLLAPSED_REPLY_COUNT)
        visible = node.children if is_expanded else node.children[:COLLAPSED_REPLY_COUNT]

        views.append(ThreadView(
            comment_id=comment.comment_id,
            author=comment.author,
            text=comment.text,
            likes=comment.like_count,
            time_ago=DateTimeUtils.format_time_ago(comment.created_at, now),
            avatar=avatar_for(comment.author),
            depth=depth,
            can_reply=depth < MAX_REPLY_DEPTH,
            replies=render_thread(visible, expanded, depth + 1, now),
            hidden_reply_count=0 if is_expanded else hidden_count,
            toggle_label=_toggle_label(hidden_count, is_expanded)
        ))
    return views
