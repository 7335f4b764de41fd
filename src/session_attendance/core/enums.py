from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    STUDENT = "student"
    PROFESSOR = "professor"


class CheckInStatus(str, Enum):
    """Outcome of a check-in attempt for one (session, student) pair."""

    RECORDED = "recorded"
    ALREADY_RECORDED = "already-recorded"
