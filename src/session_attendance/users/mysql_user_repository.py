from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, username, display_name, password_hash, role
                FROM users
                WHERE username=%s
                """,
                (username,),
            )
            return self._to_user(fetchone(cur))

    @staticmethod
    def _to_user(row) -> Optional[User]:
        if not row:
            return None
        return User(
            user_id=int(row["user_id"]),
            username=row["username"],
            display_name=row["display_name"],
            password_hash=row["password_hash"],
            role=Role(row["role"]),
        )
