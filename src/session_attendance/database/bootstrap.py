from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().with_name("schema.sql")

DEMO_PASSWORD = "123456"

# (username, display name, role)
DEMO_USERS = [
    ("prof_ahmed", "د. أحمد", "professor"),
    ("prof_mona", "د. منى", "professor"),
    ("student_sara", "سارة محمد", "student"),
    ("student_omar", "عمر علي", "student"),
]

# (course name, course code, owning professor username)
DEMO_COURSES = [
    ("مقدمة في البرمجة", "CS101", "prof_ahmed"),
    ("هياكل بيانات", "CS205", "prof_ahmed"),
    ("رياضة هندسية", "MATH110", "prof_mona"),
]

# (student username, course code)
DEMO_ENROLLMENTS = [
    ("student_sara", "CS101"),
    ("student_sara", "CS205"),
    ("student_omar", "CS101"),
    ("student_omar", "MATH110"),
]


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for the schema file (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        charset="utf8mb4",
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(target: DBConfig) -> None:
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(target: DBConfig, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    """Create the database and its tables if they do not exist yet."""
    ensure_database_exists(target)

    sql = _strip_comments(Path(schema_path).read_text(encoding="utf-8"))
    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s/%s", target.host, target.database)


def ensure_demo_data(target: DBConfig) -> bool:
    """Insert demo users, courses and enrollments into an empty database.

    Returns True when data was inserted, False when users already existed.
    """
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT COUNT(*) AS n FROM users")
        if int(cur.fetchone()["n"]) > 0:
            logger.info("Demo seed skipped: users table is not empty")
            return False

        password_hash = generate_password_hash(DEMO_PASSWORD)
        user_ids: dict[str, int] = {}
        for username, display_name, role in DEMO_USERS:
            cur.execute(
                """
                INSERT INTO users(username, display_name, password_hash, role)
                VALUES(%s,%s,%s,%s)
                """,
                (username, display_name, password_hash, role),
            )
            user_ids[username] = int(cur.lastrowid)

        course_ids: dict[str, int] = {}
        for name, code, professor in DEMO_COURSES:
            cur.execute(
                "INSERT INTO courses(name, code, professor_id) VALUES(%s,%s,%s)",
                (name, code, user_ids[professor]),
            )
            course_ids[code] = int(cur.lastrowid)

        for student, code in DEMO_ENROLLMENTS:
            cur.execute(
                "INSERT INTO enrollments(student_id, course_id) VALUES(%s,%s)",
                (user_ids[student], course_ids[code]),
            )

        conn.commit()
        logger.info(
            "Demo seed inserted: %d users, %d courses, %d enrollments",
            len(DEMO_USERS),
            len(DEMO_COURSES),
            len(DEMO_ENROLLMENTS),
        )
        return True
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def list_tables(target: DBConfig) -> list[str]:
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
