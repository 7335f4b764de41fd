from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_date
from ..common.http import current_identity, json_body, role_required
from ..common.validators import require_positive_int
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    professor_required = role_required(container.token_service, Role.PROFESSOR)

    @app.route("/api/prof/sessions", methods=["POST"], endpoint="create_session")
    @professor_required
    def create_session():
        data = json_body()
        course_id = require_positive_int(data.get("courseId"), "Course id")
        session_date = data.get("sessionDate")
        if session_date is None or (isinstance(session_date, str) and not session_date.strip()):
            raise ValidationError("Session date is required")

        session = container.session_service.create_session(current_identity().user_id, course_id, session_date)
        return jsonify(
            {
                "sessionId": session.session_id,
                "sessionCode": session.session_code,
                "sessionDate": format_date(session.session_date),
            }
        )

    @app.route("/api/prof/sessions/<course_id>", methods=["GET"], endpoint="list_sessions")
    @professor_required
    def list_sessions(course_id: str):
        sessions = container.session_service.list_sessions(
            current_identity().user_id,
            require_positive_int(course_id, "Course id"),
        )
        return jsonify(
            [
                {
                    "id": s.session_id,
                    "sessionDate": format_date(s.session_date),
                    "sessionCode": s.session_code,
                    "attendanceCount": s.attendance_count,
                }
                for s in sessions
            ]
        )
