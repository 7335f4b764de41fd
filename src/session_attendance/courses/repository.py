from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Course


class CourseRepository(Protocol):
    """Read-only access to courses and the student/course enrollment bridge."""

    def get_by_id(self, course_id: int) -> Optional[Course]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[Course]:
        """Courses the student is enrolled in, ordered by name."""

        raise NotImplementedError

    def list_for_professor(self, professor_id: int) -> Sequence[Course]:
        """Courses owned by the professor, ordered by name."""

        raise NotImplementedError

    def is_enrolled(self, student_id: int, course_id: int) -> bool:
        raise NotImplementedError
