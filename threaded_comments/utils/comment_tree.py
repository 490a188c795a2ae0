# threaded_comments/utils/comment_tree.py
"""
Read-time projection of the flat comment list into a parent/children tree.

The tree is an arena: comments are indexed by id and the structure is kept as
id lists. Nested `CommentNode` objects are only materialized by `roots()`,
when a response needs embedded children.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple

from threaded_comments.models.comment import Comment


@dataclass
class CommentNode:
    comment: Comment
    children: List['CommentNode'] = field(default_factory=list)


@dataclass
class CommentTree:
    comments: Dict[str, Comment] = field(default_factory=dict)
    root_ids: List[str] = field(default_factory=list)
    child_ids: Dict[str, List[str]] = field(default_factory=dict)
    # Comments whose parent chain does not end at a root
    detached_ids: List[str] = field(default_factory=list)

    def roots(self) -> List[CommentNode]:
        return [self._node(root_id) for root_id in self.root_ids]

    def _node(self, comment_id: str) -> CommentNode:
        return CommentNode(
            comment=self.comments[comment_id],
            children=[self._node(child_id) for child_id in self.child_ids.get(comment_id, [])]
        )

    def walk(self) -> Iterator[Tuple[int, Comment]]:
        """Depth-first (depth, comment) pairs over the attached comments."""
        stack = [(0, root_id) for root_id in reversed(self.root_ids)]
        while stack:
            depth, comment_id = stack.pop()
            yield depth, self.comments[comment_id]
            for child_id in reversed(self.child_ids.get(comment_id, [])):
                stack.append((depth + 1, child_id))

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())


def build_comment_tree(comments: Iterable[Comment]) -> CommentTree:
    """
    Builds the tree in two passes over the flat list, O(n).

    Roots and siblings keep the flat insertion order. A comment whose parent_id
    matches no stored id is neither a root nor attached anywhere, so it (and
    anything replying to it) is left out of the result and listed in
    `detached_ids` instead.
    """
    flat = list(comments)
    tree = CommentTree(comments={comment.comment_id: comment for comment in flat})

    for comment in flat:
        if comment.is_root:
            tree.root_ids.append(comment.comment_id)
        elif comment.parent_id in tree.comments:
            tree.child_ids.setdefault(comment.parent_id, []).append(comment.comment_id)

    attached = {comment.comment_id for _, comment in tree.walk()}
    tree.detached_ids = [comment.comment_id for comment in flat if comment.comment_id not in attached]
    return tree
