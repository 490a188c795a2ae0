# threaded_comments/api/auth/services.py
import logging
import threading
import uuid
from typing import Dict, List, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from threaded_comments.core.exceptions import AuthenticationError, ConflictError
from threaded_comments.models.user import Session, User


class AuthService:
    """
    In-memory accounts and login sessions.
    Nothing here survives a restart; tokens issued before one stop working.
    """
    def __init__(self):
        self._lock = threading.RLock()
        self._users: List[User] = []
        self._sessions: Dict[str, Session] = {}

    def add_user(self, username: str, password: str, user_id: Optional[str] = None) -> User:
        user = User(
            user_id=user_id or str(uuid.uuid4()),
            username=username,
            password_hash=generate_password_hash(password)
        )
        with self._lock:
            self._users.append(user)
        return user

    def register(self, username: str, password: str) -> User:
        """Creates an account. Usernames are unique regardless of case."""
        with self._lock:
            if any(u.username.lower() == username.lower() for u in self._users):
                raise ConflictError("Username already exists")
            user = self.add_user(username, password)
        logging.info(f"User registered (user_id: {user.user_id})")
        return user

    def authenticate(self, username: str, password: str) -> User:
        with self._lock:
            user = next((u for u in self._users if u.username == username), None)
        if user is None or not check_password_hash(user.password_hash, password):
            raise AuthenticationError("Invalid credentials")
        return user

    # --- sessions ---
    def open_session(self, jti: str, user_id: str) -> Session:
        session = Session(jti=jti, user_id=user_id)
        with self._lock:
            self._sessions[jti] = session
        return session

    def has_session(self, jti: str) -> bool:
        with self._lock:
            return jti in self._sessions
