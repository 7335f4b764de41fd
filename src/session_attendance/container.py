from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_DB_POOL_SIZE,
    DEFAULT_DB_POOL_TIMEOUT,
    DEFAULT_SESSION_CODE_MAX_ATTEMPTS,
    DEFAULT_SESSION_CODE_RETRY_BACKOFF,
    DEFAULT_SESSION_CODE_SUFFIX_LENGTH,
    DEFAULT_TOKEN_TTL_HOURS,
)
from .courses.mysql_course_repository import MySQLCourseRepository
from .courses.repository import CourseRepository
from .courses.service import EnrollmentService
from .database.connection import DBConfig, DatabaseConnection
from .sessions.codes import SessionCodeGenerator
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    courses_repo: CourseRepository
    sessions_repo: SessionRepository
    attendance_repo: AttendanceRepository

    token_service: TokenService
    auth_service: AuthService
    enrollment_service: EnrollmentService
    session_service: SessionService
    attendance_service: AttendanceService


def wire_services(
    *,
    users_repo: UserRepository,
    courses_repo: CourseRepository,
    sessions_repo: SessionRepository,
    attendance_repo: AttendanceRepository,
    jwt_secret: str,
    token_ttl_hours: float = DEFAULT_TOKEN_TTL_HOURS,
    code_suffix_length: int = DEFAULT_SESSION_CODE_SUFFIX_LENGTH,
    code_max_attempts: int = DEFAULT_SESSION_CODE_MAX_ATTEMPTS,
    code_retry_backoff: float = DEFAULT_SESSION_CODE_RETRY_BACKOFF,
) -> Container:
    """Build the services on top of any repository implementations."""
    token_service = TokenService(jwt_secret, ttl_hours=token_ttl_hours)
    enrollment_service = EnrollmentService(courses_repo)
    session_service = SessionService(
        sessions_repo,
        enrollment_service,
        code_generator=SessionCodeGenerator(suffix_length=code_suffix_length),
        max_attempts=code_max_attempts,
        retry_backoff=code_retry_backoff,
    )
    attendance_service = AttendanceService(attendance_repo, sessions_repo, enrollment_service)

    return Container(
        users_repo=users_repo,
        courses_repo=courses_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        token_service=token_service,
        auth_service=AuthService(users_repo, token_service),
        enrollment_service=enrollment_service,
        session_service=session_service,
        attendance_service=attendance_service,
    )


def build_container(*, db_config: dict, settings: Any) -> Container:
    """Wire the MySQL repositories using values from a settings module."""
    config = DBConfig.from_dict(
        db_config,
        pool_size=getattr(settings, "DB_POOL_SIZE", DEFAULT_DB_POOL_SIZE),
        pool_timeout=getattr(settings, "DB_POOL_TIMEOUT", DEFAULT_DB_POOL_TIMEOUT),
    )
    conn = DatabaseConnection.get_instance(config)

    return wire_services(
        users_repo=MySQLUserRepository(conn),
        courses_repo=MySQLCourseRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        jwt_secret=getattr(settings, "JWT_SECRET", None) or getattr(settings, "SECRET_KEY"),
        token_ttl_hours=getattr(settings, "TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS),
        code_suffix_length=getattr(settings, "SESSION_CODE_SUFFIX_LENGTH", DEFAULT_SESSION_CODE_SUFFIX_LENGTH),
        code_max_attempts=getattr(settings, "SESSION_CODE_MAX_ATTEMPTS", DEFAULT_SESSION_CODE_MAX_ATTEMPTS),
        code_retry_backoff=getattr(settings, "SESSION_CODE_RETRY_BACKOFF", DEFAULT_SESSION_CODE_RETRY_BACKOFF),
    )
