# threaded_comments/core/exceptions.py
"""
Domain errors raised by the service layer.

Input validation failures use marshmallow's ValidationError directly so that
schema errors and service-level checks reach the client in the same shape.
"""


class NotFoundError(LookupError):
    """A comment (or reply parent) id does not resolve to a stored comment."""

    def __init__(self, message: str, error_code: str = "NOT_FOUND"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConflictError(Exception):
    """The resource being created already exists (e.g. a taken username)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(Exception):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
        self.message = message
