from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SessionSummary, SessionWithCourse
from .repository import SessionRepository


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, course_id: int, session_date: date, session_code: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO sessions(course_id, session_date, session_code)
                VALUES(%s,%s,%s)
                """,
                (int(course_id), session_date, session_code),
            )
            return int(cur.lastrowid)

    def get_by_id(self, session_id: int) -> Optional[SessionWithCourse]:
        return self._get_one("s.session_id=%s", int(session_id))

    def get_by_code(self, session_code: str) -> Optional[SessionWithCourse]:
        return self._get_one("s.session_code=%s", session_code)

    def _get_one(self, where: str, value: object) -> Optional[SessionWithCourse]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.session_id, s.session_date, s.session_code,
                       c.course_id, c.name AS course_name, c.professor_id
                FROM sessions s
                JOIN courses c ON c.course_id = s.course_id
                WHERE {where}
                """,
                (value,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return SessionWithCourse(
                session_id=int(r["session_id"]),
                session_date=r["session_date"],
                session_code=r["session_code"],
                course_id=int(r["course_id"]),
                course_name=r["course_name"],
                professor_id=int(r["professor_id"]),
            )

    def list_for_course(self, course_id: int) -> Sequence[SessionSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.session_id, s.session_date, s.session_code,
                       COUNT(a.attendance_id) AS attendance_count
                FROM sessions s
                LEFT JOIN attendance a ON a.session_id = s.session_id
                WHERE s.course_id=%s
                GROUP BY s.session_id, s.session_date, s.session_code
                ORDER BY s.session_date DESC, s.session_id DESC
                """,
                (int(course_id),),
            )
            return [
                SessionSummary(
                    session_id=int(r["session_id"]),
                    session_date=r["session_date"],
                    session_code=r["session_code"],
                    attendance_count=int(r["attendance_count"] or 0),
                )
                for r in fetchall(cur)
            ]
