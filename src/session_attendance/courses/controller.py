from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_identity, role_required
from ..container import Container
from ..core.enums import Role
from .model import Course


def _course_json(course: Course) -> dict:
    return {"id": course.course_id, "name": course.name, "code": course.code}


def register(app: Flask, container: Container) -> None:
    student_required = role_required(container.token_service, Role.STUDENT)
    professor_required = role_required(container.token_service, Role.PROFESSOR)

    @app.route("/api/student/courses", methods=["GET"], endpoint="student_courses")
    @student_required
    def student_courses():
        courses = container.enrollment_service.courses_for_student(current_identity().user_id)
        return jsonify([_course_json(c) for c in courses])

    @app.route("/api/prof/courses", methods=["GET"], endpoint="professor_courses")
    @professor_required
    def professor_courses():
        courses = container.enrollment_service.courses_for_professor(current_identity().user_id)
        return jsonify([_course_json(c) for c in courses])
