# threaded_comments/api/comments/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from threaded_comments.api.comments.schemas import (
    CommentCreateSchema, ReplyCreateSchema, CommentResponseSchema,
    CommentTreeSchema, ThreadViewSchema
)
from threaded_comments.core.errors import validation_error_body
from threaded_comments.core.exceptions import NotFoundError
from threaded_comments.core.security import current_liker_id
from threaded_comments.utils.thread_view import render_thread

comments_bp = Blueprint('comments_bp', __name__)


@comments_bp.route('', methods=['GET'])
def get_comments():
    """All comments as a nested thread, roots and replies in posting order."""
    comment_service = current_app.services['comments']
    try:
        tree = comment_service.get_comment_tree()
        return jsonify(CommentTreeSchema(many=True).dump(tree.roots())), 200
    except Exception as e:
        logging.error(f"Error while building the comment tree: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "error": "Failed to retrieve comments"}), 500


@comments_bp.route('', methods=['POST'])
def create_comment():
    """
    Creates a new comment.
    - With `parentId` the comment becomes a child of that id (not checked).
    - Responds 201 with the created flat record.
    """
    comment_service = current_app.services['comments']
    try:
        data = CommentCreateSchema().load(request.get_json(silent=True) or {})
        new_comment = comment_service.create_comment(data['text'], data['author'], data['parent_id'])
        return jsonify(CommentResponseSchema().dump(new_comment)), 201
    except ValidationError as err:
        return jsonify(validation_error_body(err)), 400
    except Exception as e:
        logging.error(f"Error while creating a comment: {e}", exc_info=True)
        return jsonify({"error_code": "COMMENT_CREATION_FAILED", "error": "Failed to create comment"}), 500


@comments_bp.route('/<string:comment_id>/like', methods=['POST'])
@jwt_required(optional=True)
def toggle_comment_like(comment_id: str):
    """
    Likes the comment, or takes the like back.
    Without a bearer token every caller shares the anonymous identity.
    """
    comment_service = current_app.services['comments']
    try:
        updated = comment_service.toggle_like(comment_id, current_liker_id())
        return jsonify(CommentResponseSchema().dump(updated)), 200
    except NotFoundError as e:
        return jsonify({"error_code": e.error_code, "error": e.message}), 404
    except Exception as e:
        logging.error(f"Error while toggling like (comment_id: {comment_id}): {e}", exc_info=True)
        return jsonify({"error_code": "LIKE_TOGGLE_FAILED", "error": "Failed to update likes"}), 500


@comments_bp.route('/<string:comment_id>/reply', methods=['POST'])
def reply_to_comment(comment_id: str):
    comment_service = current_app.services['comments']
    try:
        data = ReplyCreateSchema().load(request.get_json(silent=True) or {})
        reply = comment_service.create_reply(comment_id, data['text'], data['author'])
        return jsonify(CommentResponseSchema().dump(reply)), 201
    except ValidationError as err:
        return jsonify(validation_error_body(err)), 400
    except NotFoundError as e:
        return jsonify({"error_code": e.error_code, "error": e.message}), 404
    except Exception as e:
        logging.error(f"Error while creating a reply (parent: {comment_id}): {e}", exc_info=True)
        return jsonify({"error_code": "REPLY_CREATION_FAILED", "error": "Failed to create reply"}), 500


@comments_bp.route('/thread', methods=['GET'])
def get_thread_view():
    """
    Render-ready thread.

    Query Parameters:
        - expanded (str, optional): comma separated ids whose replies are fully shown
    """
    comment_service = current_app.services['comments']
    expanded = {cid for cid in request.args.get('expanded', '').split(',') if cid}
    try:
        views = render_thread(comment_service.get_comment_tree().roots(), expanded)
        return jsonify(ThreadViewSchema(many=True).dump(views)), 200
    except Exception as e:
        logging.error(f"Error while rendering the thread view: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "error": "Failed to render thread"}), 500
