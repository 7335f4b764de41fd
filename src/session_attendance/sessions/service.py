from __future__ import annotations

import logging
import time
from typing import Any, Callable, Sequence

from ..common.datetime_utils import parse_calendar_date
from ..core.constants import DEFAULT_SESSION_CODE_MAX_ATTEMPTS, DEFAULT_SESSION_CODE_RETRY_BACKOFF
from ..core.exceptions import ConflictError, DuplicateKeyError
from ..courses.service import EnrollmentService
from .codes import SessionCodeGenerator
from .model import Session, SessionSummary
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    """Use cases: a professor opens a session for a course and lists sessions."""

    def __init__(
        self,
        sessions: SessionRepository,
        enrollment: EnrollmentService,
        *,
        code_generator: SessionCodeGenerator | None = None,
        max_attempts: int = DEFAULT_SESSION_CODE_MAX_ATTEMPTS,
        retry_backoff: float = DEFAULT_SESSION_CODE_RETRY_BACKOFF,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._sessions = sessions
        self._enrollment = enrollment
        self._codes = code_generator or SessionCodeGenerator()
        self._max_attempts = int(max_attempts)
        self._retry_backoff = float(retry_backoff)
        self._sleep = sleep

    def create_session(self, professor_id: int, course_id: int, session_date: Any) -> Session:
        course = self._enrollment.require_owned_course(professor_id, course_id)
        day = parse_calendar_date(session_date)

        # The insert is the uniqueness check; a taken code just means a new suffix.
        for attempt in range(1, self._max_attempts + 1):
            code = self._codes.generate(course.code, day)
            try:
                session_id = self._sessions.create(course_id=course.course_id, session_date=day, session_code=code)
            except DuplicateKeyError:
                logger.warning("Session code %s already taken (attempt %d/%d)", code, attempt, self._max_attempts)
                if self._retry_backoff > 0 and attempt < self._max_attempts:
                    self._sleep(self._retry_backoff)
                continue

            logger.info("Session %s created for course %s on %s", code, course.code, day.isoformat())
            return Session(session_id=session_id, course_id=course.course_id, session_date=day, session_code=code)

        logger.error("Gave up generating a session code for %s after %d attempts", course.code, self._max_attempts)
        raise ConflictError("Could not generate a unique session code, please try again")

    def list_sessions(self, professor_id: int, course_id: int) -> Sequence[SessionSummary]:
        course = self._enrollment.require_owned_course(professor_id, course_id)
        return list(self._sessions.list_for_course(course.course_id))
