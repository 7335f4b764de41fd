from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from ..core.enums import CheckInStatus


@dataclass(frozen=True)
class CheckInResult:
    status: CheckInStatus
    course_name: str
    session_id: int


@dataclass(frozen=True)
class HistoryEntry:
    """Read-model: one of a student's check-ins."""

    course_name: str
    session_date: date
    scanned_at: datetime
    session_code: str


@dataclass(frozen=True)
class Attendee:
    student_name: str
    username: str
    attended_at: datetime


@dataclass(frozen=True)
class SessionAttendance:
    """Read-model: who attended one session, earliest first."""

    session_date: date
    course_name: str
    attendees: list[Attendee] = field(default_factory=list)
