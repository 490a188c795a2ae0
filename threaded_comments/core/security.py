# threaded_comments/core/security.py
from flask import Flask, current_app, jsonify
from flask_jwt_extended import JWTManager, create_access_token, get_jti, get_jwt_identity

from threaded_comments.models.user import User


def init_jwt(app: Flask, auth_service) -> JWTManager:
    """
    Sets up bearer tokens for the app.
    A token is only honored while its jti has a live session in `auth_service`,
    so every token dies with the process, like the rest of the state.
    """
    jwt = JWTManager(app)

    @jwt.token_in_blocklist_loader
    def check_if_token_revoked(jwt_header, jwt_payload):
        return not auth_service.has_session(jwt_payload['jti'])

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"error_code": "UNAUTHORIZED", "error": reason}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"error_code": "INVALID_TOKEN", "error": reason}), 422

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"error_code": "TOKEN_EXPIRED", "error": "Token has expired"}), 401

    @jwt.revoked_token_loader
    def revoked_token(jwt_header, jwt_payload):
        return jsonify({"error_code": "SESSION_NOT_FOUND", "error": "Session is no longer active"}), 401

    return jwt


def issue_token(user: User, auth_service) -> str:
    """Creates an access token for the user and registers its session."""
    token = create_access_token(identity=user.user_id)
    auth_service.open_session(get_jti(token), user.user_id)
    return token


def current_liker_id() -> str:
    """
    Identity a like is recorded under: the token's user id, or the shared
    anonymous id for requests without a token. Call from a view decorated
    with @jwt_required(optional=True).
    """
    return get_jwt_identity() or current_app.config['ANONYMOUS_USER_ID']
