from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Course
from .repository import CourseRepository


class MySQLCourseRepository(CourseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, course_id: int) -> Optional[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT course_id, name, code, professor_id
                FROM courses
                WHERE course_id=%s
                """,
                (int(course_id),),
            )
            r = fetchone(cur)
            return self._to_course(r) if r else None

    def list_for_student(self, student_id: int) -> Sequence[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.course_id, c.name, c.code, c.professor_id
                FROM courses c
                JOIN enrollments e ON e.course_id = c.course_id
                WHERE e.student_id=%s
                ORDER BY c.name, c.course_id
                """,
                (int(student_id),),
            )
            return [self._to_course(r) for r in fetchall(cur)]

    def list_for_professor(self, professor_id: int) -> Sequence[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT course_id, name, code, professor_id
                FROM courses
                WHERE professor_id=%s
                ORDER BY name, course_id
                """,
                (int(professor_id),),
            )
            return [self._to_course(r) for r in fetchall(cur)]

    def is_enrolled(self, student_id: int, course_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS ok FROM enrollments WHERE student_id=%s AND course_id=%s",
                (int(student_id), int(course_id)),
            )
            return fetchone(cur) is not None

    @staticmethod
    def _to_course(r) -> Course:
        return Course(
            course_id=int(r["course_id"]),
            name=r["name"],
            code=r["code"],
            professor_id=int(r["professor_id"]),
        )
