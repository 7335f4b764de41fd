from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_date, format_timestamp
from ..common.http import current_identity, json_body, role_required
from ..common.validators import require_positive_int
from ..container import Container
from ..core.enums import CheckInStatus, Role

CHECK_IN_MESSAGES = {
    CheckInStatus.RECORDED: "Attendance recorded successfully",
    CheckInStatus.ALREADY_RECORDED: "Your attendance was already recorded",
}


def register(app: Flask, container: Container) -> None:
    student_required = role_required(container.token_service, Role.STUDENT)
    professor_required = role_required(container.token_service, Role.PROFESSOR)

    @app.route("/api/student/attendance", methods=["POST"], endpoint="record_attendance")
    @student_required
    def record_attendance():
        data = json_body()
        result = container.attendance_service.record_attendance(current_identity().user_id, data.get("sessionCode"))
        return jsonify(
            {
                "message": CHECK_IN_MESSAGES[result.status],
                "status": result.status.value,
                "courseName": result.course_name,
            }
        )

    @app.route("/api/student/history", methods=["GET"], endpoint="student_history")
    @student_required
    def student_history():
        entries = container.attendance_service.history_for_student(current_identity().user_id)
        return jsonify(
            [
                {
                    "courseName": e.course_name,
                    "sessionDate": format_date(e.session_date),
                    "scannedAt": format_timestamp(e.scanned_at),
                    "sessionCode": e.session_code,
                }
                for e in entries
            ]
        )

    @app.route("/api/prof/sessions/<session_id>/attendance", methods=["GET"], endpoint="session_attendance")
    @professor_required
    def session_attendance(session_id: str):
        report = container.attendance_service.attendees_for_session(
            current_identity().user_id,
            require_positive_int(session_id, "Session id"),
        )
        return jsonify(
            {
                "sessionDate": format_date(report.session_date),
                "courseName": report.course_name,
                "attendees": [
                    {
                        "studentName": a.student_name,
                        "username": a.username,
                        "attendedAt": format_timestamp(a.attended_at),
                    }
                    for a in report.attendees
                ],
            }
        )
