from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Attendee, HistoryEntry


class AttendanceRepository(Protocol):
    def create(self, *, session_id: int, student_id: int, scanned_at: datetime) -> int:
        """Insert a check-in and return its id.

        Raises DuplicateKeyError when the (session, student) pair already exists.
        """

        raise NotImplementedError

    def list_history_for_student(self, student_id: int) -> Sequence[HistoryEntry]:
        """Newest session date first, then newest scan first."""

        raise NotImplementedError

    def list_attendees(self, session_id: int) -> Sequence[Attendee]:
        """Earliest check-in first."""

        raise NotImplementedError
