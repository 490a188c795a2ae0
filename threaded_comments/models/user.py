# threaded_comments/models/user.py
from dataclasses import dataclass, field
from datetime import datetime

from threaded_comments.utils.datetime_utils import DateTimeUtils


@dataclass
class User:
    """Registered account. Only the password hash is kept."""
    user_id: str
    username: str
    password_hash: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)


@dataclass
class Session:
    """Live login, keyed by the token's jti in AuthService."""
    jti: str
    user_id: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)
