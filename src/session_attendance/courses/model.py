from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Course:
    """Domain entity: a course owned by exactly one professor."""

    course_id: int
    name: str
    code: str
    professor_id: int
