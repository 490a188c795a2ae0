# threaded_comments/utils/test_comment_tree.py
from threaded_comments.models.comment import Comment
from threaded_comments.utils.comment_tree import build_comment_tree


def make(comment_id, parent_id=None):
    return Comment(comment_id=comment_id, text=f"text {comment_id}", author="tester", parent_id=parent_id)


def ids(nodes):
    return [node.comment.comment_id for node in nodes]


def test_empty_input_gives_empty_tree():
    tree = build_comment_tree([])
    assert tree.roots() == []
    assert len(tree) == 0


def test_nests_replies_under_parents():
    tree = build_comment_tree([make("1"), make("2"), make("3", "1"), make("4", "1"), make("5", "3")])

    roots = tree.roots()
    assert ids(roots) == ["1", "2"]
    assert ids(roots[0].children) == ["3", "4"]
    assert ids(roots[0].children[0].children) == ["5"]
    assert roots[1].children == []
    assert len(tree) == 5


def test_keeps_insertion_order_not_id_or_time_order():
    tree = build_comment_tree([make("b"), make("a"), make("z", "b"), make("y", "b"), make("x", "b")])
    roots = tree.roots()
    assert ids(roots) == ["b", "a"]
    assert ids(roots[0].children) == ["z", "y", "x"]


def test_child_listed_before_parent_is_still_attached():
    tree = build_comment_tree([make("2", "1"), make("1")])
    roots = tree.roots()
    assert ids(roots) == ["1"]
    assert ids(roots[0].children) == ["2"]


def test_dangling_parent_drops_comment_and_its_replies():
    comments = [make("1"), make("orphan", "missing"), make("orphan-reply", "orphan"), make("2", "1")]
    tree = build_comment_tree(comments)

    assert ids(tree.roots()) == ["1"]
    assert ids(tree.roots()[0].children) == ["2"]
    assert tree.detached_ids == ["orphan", "orphan-reply"]
    assert len(tree) == 2


def test_self_parented_and_cyclic_comments_are_detached():
    tree = build_comment_tree([make("1"), make("self", "self"), make("a", "b"), make("b", "a")])
    assert ids(tree.roots()) == ["1"]
    assert sorted(tree.detached_ids) == ["a", "b", "self"]


def test_walk_reports_depth_first_order():
    tree = build_comment_tree([make("1"), make("2"), make("3", "1"), make("4", "3"), make("5", "1")])
    assert [(depth, c.comment_id) for depth, c in tree.walk()] == [
        (0, "1"), (1, "3"), (2, "4"), (1, "5"), (0, "2")
    ]


def test_nodes_reference_input_records_without_copying():
    root = make("1")
    tree = build_comment_tree([root])
    assert tree.roots()[0].comment is root
