from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import SessionSummary, SessionWithCourse


class SessionRepository(Protocol):
    def create(self, *, course_id: int, session_date: date, session_code: str) -> int:
        """Insert a session and return its id.

        Raises DuplicateKeyError when ``session_code`` is already taken.
        """

        raise NotImplementedError

    def get_by_id(self, session_id: int) -> Optional[SessionWithCourse]:
        raise NotImplementedError

    def get_by_code(self, session_code: str) -> Optional[SessionWithCourse]:
        """Exact, case-sensitive lookup."""

        raise NotImplementedError

    def list_for_course(self, course_id: int) -> Sequence[SessionSummary]:
        """Sessions newest date first, then newest id first, with attendance counts."""

        raise NotImplementedError
