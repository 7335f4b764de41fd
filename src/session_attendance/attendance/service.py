from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..core.enums import CheckInStatus
from ..core.exceptions import DuplicateKeyError, NotEnrolledError, NotOwnerError, SessionNotFoundError
from ..courses.service import EnrollmentService
from ..sessions.repository import SessionRepository
from .model import CheckInResult, HistoryEntry, SessionAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Student check-in and the attendance read paths.

    A (session, student) pair moves from unrecorded to recorded exactly once.
    Repeating a successful check-in reports ``already-recorded`` instead of
    failing.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        sessions: SessionRepository,
        enrollment: EnrollmentService,
    ):
        self._attendance = attendance
        self._sessions = sessions
        self._enrollment = enrollment

    def record_attendance(self, student_id: int, session_code: str, *, now: datetime | None = None) -> CheckInResult:
        code = require_non_empty(session_code, "Session code")

        session = self._sessions.get_by_code(code)
        if not session:
            raise SessionNotFoundError("Session code not found")

        if not self._enrollment.is_enrolled(student_id, session.course_id):
            raise NotEnrolledError("You are not enrolled in this course")

        # No read-before-write: the (session, student) unique key decides the winner.
        try:
            self._attendance.create(
                session_id=session.session_id,
                student_id=int(student_id),
                scanned_at=now or now_utc(),
            )
        except DuplicateKeyError:
            logger.info("Student %s already checked in to session %s", student_id, session.session_code)
            return CheckInResult(
                status=CheckInStatus.ALREADY_RECORDED,
                course_name=session.course_name,
                session_id=session.session_id,
            )

        logger.info("Student %s checked in to session %s", student_id, session.session_code)
        return CheckInResult(
            status=CheckInStatus.RECORDED,
            course_name=session.course_name,
            session_id=session.session_id,
        )

    def history_for_student(self, student_id: int) -> Sequence[HistoryEntry]:
        return list(self._attendance.list_history_for_student(int(student_id)))

    def attendees_for_session(self, professor_id: int, session_id: int) -> SessionAttendance:
        session = self._sessions.get_by_id(int(session_id))
        if not session:
            raise SessionNotFoundError("Session not found")
        if session.professor_id != int(professor_id):
            raise NotOwnerError("You cannot view attendance for this session")

        return SessionAttendance(
            session_date=session.session_date,
            course_name=session.course_name,
            attendees=list(self._attendance.list_attendees(session.session_id)),
        )
