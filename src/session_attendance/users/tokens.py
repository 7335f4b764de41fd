"""Signed bearer tokens carrying the caller's identity and role.

Verification is self-contained: the claims are trusted once the signature and
expiry check out, so no store lookup happens per request.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, TOKEN_ALGORITHM
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from .model import Identity

logger = logging.getLogger(__name__)


class TokenService:
    def __init__(self, secret: str, *, ttl_hours: float = DEFAULT_TOKEN_TTL_HOURS):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._ttl = timedelta(hours=ttl_hours)

    def issue(self, identity: Identity, *, now: Optional[datetime] = None) -> str:
        """Create a token for ``identity`` that expires after the configured TTL."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "id": identity.user_id,
            "role": identity.role.value,
            "displayName": identity.display_name,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def authorize(self, token: Optional[str], required_role: Optional[Role] = None) -> Identity:
        """Verify ``token`` and, if asked, check its role claim.

        Raises:
            AuthenticationError: The token is missing, malformed, badly signed,
                expired or carries unusable claims.
            AuthorizationError: ``required_role`` differs from the role claim.
        """
        if not token:
            raise AuthenticationError("Login required")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": ["exp", "id", "role"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Session expired, please log in again")
        except jwt.InvalidTokenError as exc:
            logger.debug("Rejected token: %s", exc)
            raise AuthenticationError("Invalid token, please log in again")

        identity = self._to_identity(payload)
        if required_role is not None and identity.role != required_role:
            raise AuthorizationError("You do not have permission to do this")
        return identity

    @staticmethod
    def _to_identity(payload: dict) -> Identity:
        try:
            user_id = payload["id"]
            if isinstance(user_id, bool) or not isinstance(user_id, int):
                raise ValueError(user_id)
            role = Role(payload["role"])
        except (KeyError, ValueError):
            raise AuthenticationError("Invalid token, please log in again")
        return Identity(
            user_id=user_id,
            role=role,
            display_name=str(payload.get("displayName") or ""),
        )
