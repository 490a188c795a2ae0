# threaded_comments/core/errors.py
import logging
from typing import Any, Dict

from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException


def first_message(messages: Any) -> str:
    """Pulls the first human readable message out of marshmallow's error dict."""
    while isinstance(messages, dict) and messages:
        messages = next(iter(messages.values()))
    while isinstance(messages, list) and messages:
        messages = messages[0]
        if isinstance(messages, dict):
            return first_message(messages)
    return str(messages) if messages else "Invalid request"


def validation_error_body(err: ValidationError) -> Dict[str, Any]:
    return {"error_code": "VALIDATION_ERROR", "error": first_message(err.messages), "details": err.messages}


def register_error_handlers(app: Flask) -> None:
    """App-wide fallbacks for anything a route did not handle itself."""

    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        return jsonify(validation_error_body(err)), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        return jsonify({"error_code": err.name.upper().replace(" ", "_"), "error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "error": "Internal server error"}), 500
