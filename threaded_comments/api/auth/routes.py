# threaded_comments/api/auth/routes.py

import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from threaded_comments.api.auth.schemas import CredentialsSchema, TokenResponseSchema
from threaded_comments.core.errors import validation_error_body
from threaded_comments.core.exceptions import AuthenticationError, ConflictError
from threaded_comments.core.security import issue_token

auth_bp = Blueprint('auth_bp', __name__)


@auth_bp.route('/register', methods=['POST'])
def register():
    """Creates an account and logs it in right away."""
    auth_service = current_app.services['auth']
    try:
        data = CredentialsSchema().load(request.get_json(silent=True) or {})
        user = auth_service.register(data['username'], data['password'])
        token = issue_token(user, auth_service)
        return jsonify(TokenResponseSchema().dump({"token": token, "user": user})), 201
    except ValidationError as err:
        return jsonify(validation_error_body(err)), 400
    except ConflictError as e:
        return jsonify({"error_code": "USERNAME_TAKEN", "error": e.message}), 409
    except Exception as e:
        logging.error(f"Error during registration: {e}", exc_info=True)
        return jsonify({"error_code": "REGISTRATION_FAILED", "error": "Failed to register"}), 500


@auth_bp.route('/login', methods=['POST'])
def login():
    auth_service = current_app.services['auth']
    try:
        data = CredentialsSchema().load(request.get_json(silent=True) or {})
        user = auth_service.authenticate(data['username'], data['password'])
        token = issue_token(user, auth_service)
        return jsonify(TokenResponseSchema().dump({"token": token, "user": user})), 200
    except ValidationError as err:
        return jsonify(validation_error_body(err)), 400
    except AuthenticationError as e:
        return jsonify({"error_code": "INVALID_CREDENTIALS", "error": e.message}), 401
    except Exception as e:
        logging.error(f"Error during login: {e}", exc_info=True)
        return jsonify({"error_code": "LOGIN_FAILED", "error": "Failed to log in"}), 500
