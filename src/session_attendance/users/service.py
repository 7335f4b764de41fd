from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import InvalidCredentialsError, ValidationError
from .model import Identity
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """What the login endpoint hands back to the client."""

    user_id: int
    username: str
    display_name: str
    role: Role
    token: str


class AuthService:
    """Use case: authenticate a user (login) and issue a bearer token."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def authenticate(self, username: str, password: str) -> LoginResult:
        if not isinstance(password, str) or not password:
            raise ValidationError("Username and password are required")
        if not isinstance(username, str) or not username.strip():
            raise ValidationError("Username and password are required")
        username = username.strip()

        user = self._users.get_by_username(username)
        if not user:
            logger.info("Login failed for unknown user %r", username)
            raise InvalidCredentialsError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            logger.info("Login failed for user %r: wrong password", username)
            raise InvalidCredentialsError("Invalid username or password")

        identity = Identity(user_id=user.user_id, role=user.role, display_name=user.display_name)
        logger.info("User %r logged in as %s", user.username, user.role.value)
        return LoginResult(
            user_id=user.user_id,
            username=user.username,
            display_name=user.display_name,
            role=user.role,
            token=self._tokens.issue(identity),
        )
