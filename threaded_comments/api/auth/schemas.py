# threaded_comments/api/auth/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

CREDENTIALS_REQUIRED = "Username and password are required"


class CredentialsSchema(Schema):
    """Body of /auth/register and /auth/login."""
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(
        required=True,
        validate=validate.Length(min=1, error=CREDENTIALS_REQUIRED),
        error_messages={"required": CREDENTIALS_REQUIRED, "null": CREDENTIALS_REQUIRED}
    )
    password = fields.Str(
        required=True,
        validate=validate.Length(min=1, error=CREDENTIALS_REQUIRED),
        error_messages={"required": CREDENTIALS_REQUIRED, "null": CREDENTIALS_REQUIRED}
    )


class UserPublicSchema(Schema):
    id = fields.Str(attribute="user_id", required=True)
    username = fields.Str(required=True)


class TokenResponseSchema(Schema):
    token = fields.Str(required=True)
    user = fields.Nested(UserPublicSchema, required=True)
