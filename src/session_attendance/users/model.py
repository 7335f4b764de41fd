from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account that can log in.

    Note: Plain data object (no DB access code).
    """

    user_id: int
    username: str
    display_name: str
    password_hash: str
    role: Role


@dataclass(frozen=True)
class Identity:
    """Claims carried by a bearer token."""

    user_id: int
    role: Role
    display_name: str
