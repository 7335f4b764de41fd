from __future__ import annotations

from typing import Sequence

from ..core.exceptions import CourseNotFoundError, NotOwnerError
from .model import Course
from .repository import CourseRepository


class EnrollmentService:
    """Who may act on what: student enrollments and professor ownership."""

    def __init__(self, courses: CourseRepository):
        self._courses = courses

    def courses_for_student(self, student_id: int) -> Sequence[Course]:
        return list(self._courses.list_for_student(int(student_id)))

    def courses_for_professor(self, professor_id: int) -> Sequence[Course]:
        return list(self._courses.list_for_professor(int(professor_id)))

    def is_enrolled(self, student_id: int, course_id: int) -> bool:
        return self._courses.is_enrolled(int(student_id), int(course_id))

    def owns_course(self, professor_id: int, course_id: int) -> bool:
        course = self._courses.get_by_id(int(course_id))
        return course is not None and course.professor_id == int(professor_id)

    def require_owned_course(self, professor_id: int, course_id: int) -> Course:
        """Return the course if ``professor_id`` owns it.

        Raises:
            CourseNotFoundError: No course has this id.
            NotOwnerError: The course belongs to another professor.
        """
        course = self._courses.get_by_id(int(course_id))
        if not course:
            raise CourseNotFoundError("Course not found")
        if course.professor_id != int(professor_id):
            raise NotOwnerError("This course is not yours")
        return course
