# threaded_comments/api/comments/schemas.py
from dataclasses import asdict

from marshmallow import EXCLUDE, Schema, fields, pre_dump, validate

TEXT_REQUIRED = "Text is required"


class ReplyCreateSchema(Schema):
    """
    POST /comments/{comment_id}/reply
    Validates the body of a reply request.
    """
    class Meta:
        unknown = EXCLUDE

    text = fields.Str(
        required=True,
        validate=validate.Length(min=1, error=TEXT_REQUIRED),
        error_messages={"required": TEXT_REQUIRED, "null": TEXT_REQUIRED}
    )
    author = fields.Str(load_default=None, allow_none=True)


class CommentCreateSchema(ReplyCreateSchema):
    """POST /comments body: a root comment, or a child when parentId is given."""
    parent_id = fields.Str(data_key="parentId", load_default=None, allow_none=True)


class CommentResponseSchema(Schema):
    """Flat comment record in the JSON shape the client reads."""
    id = fields.Str(attribute="comment_id", required=True)
    parent_id = fields.Str(data_key="parentId", allow_none=True)
    text = fields.Str(required=True)
    author = fields.Str(required=True)
    timestamp = fields.DateTime(attribute="created_at", required=True)
    likes = fields.Int(attribute="like_count", required=True)


class CommentTreeSchema(CommentResponseSchema):
    """Dumps CommentNode objects: the comment fields plus nested children."""
    children = fields.List(fields.Nested(lambda: CommentTreeSchema()))

    @pre_dump
    def unwrap_node(self, node, **kwargs):
        return {**asdict(node.comment), "children": node.children}


# --- thread view model ---

class AvatarSchema(Schema):
    letter = fields.Str(required=True)
    color_class = fields.Str(data_key="colorClass", required=True)


class ThreadViewSchema(Schema):
    id = fields.Str(attribute="comment_id", required=True)
    author = fields.Str(required=True)
    text = fields.Str(required=True)
    likes = fields.Int(required=True)
    time_ago = fields.Str(data_key="timeAgo", required=True)
    avatar = fields.Nested(AvatarSchema, required=True)
    depth = fields.Int(required=True)
    can_reply = fields.Bool(data_key="canReply", required=True)
    replies = fields.List(fields.Nested(lambda: ThreadViewSchema()))
    hidden_reply_count = fields.Int(data_key="hiddenReplyCount")
    toggle_label = fields.Str(data_key="toggleLabel", allow_none=True)
