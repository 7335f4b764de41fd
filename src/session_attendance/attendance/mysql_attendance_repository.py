from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Attendee, HistoryEntry
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, session_id: int, student_id: int, scanned_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(session_id, student_id, scanned_at)
                VALUES(%s,%s,%s)
                """,
                (int(session_id), int(student_id), scanned_at),
            )
            return int(cur.lastrowid)

    def list_history_for_student(self, student_id: int) -> Sequence[HistoryEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.name AS course_name,
                       s.session_date,
                       a.scanned_at,
                       s.session_code
                FROM attendance a
                JOIN sessions s ON s.session_id = a.session_id
                JOIN courses c ON c.course_id = s.course_id
                WHERE a.student_id=%s
                ORDER BY s.session_date DESC, a.scanned_at DESC, a.attendance_id DESC
                """,
                (int(student_id),),
            )
            return [
                HistoryEntry(
                    course_name=r["course_name"],
                    session_date=r["session_date"],
                    scanned_at=r["scanned_at"],
                    session_code=r["session_code"],
                )
                for r in fetchall(cur)
            ]

    def list_attendees(self, session_id: int) -> Sequence[Attendee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT u.display_name AS student_name,
                       u.username,
                       a.scanned_at
                FROM attendance a
                JOIN users u ON u.user_id = a.student_id
                WHERE a.session_id=%s
                ORDER BY a.scanned_at ASC, a.attendance_id ASC
                """,
                (int(session_id),),
            )
            return [
                Attendee(
                    student_name=r["student_name"],
                    username=r["username"],
                    attended_at=r["scanned_at"],
                )
                for r in fetchall(cur)
            ]
