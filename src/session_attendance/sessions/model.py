from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Session:
    """Domain entity: one class meeting of a course. Immutable once created."""

    session_id: int
    course_id: int
    session_date: date
    session_code: str


@dataclass(frozen=True)
class SessionWithCourse:
    """Read-model: a session joined with the course fields the checks need."""

    session_id: int
    session_date: date
    session_code: str
    course_id: int
    course_name: str
    professor_id: int


@dataclass(frozen=True)
class SessionSummary:
    """Read-model for a professor's session list."""

    session_id: int
    session_date: date
    session_code: str
    attendance_count: int
