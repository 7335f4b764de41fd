"""Session Attendance package.

Professors open dated sessions for the courses they own; enrolled students
check in with the session code. Organized by feature modules (users, courses,
sessions, attendance) with a thin Flask controller layer over service and
repository layers.
"""
from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from .config import get_settings_module
from .core.logging_config import setup_logging
from .common.http import register_error_handlers
from .database.bootstrap import apply_schema, ensure_demo_data, list_tables
from .database.connection import DBConfig

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .courses.controller import register as register_courses
from .sessions.controller import register as register_sessions
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    Args:
        container: Pre-wired services (tests pass one backed by fakes). When
            omitted, MySQL repositories are built from the settings.
        settings_module: Dotted settings module; defaults to the one chosen by
            ``APP_ENV``.
    """
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    CORS(app, resources={r"/api/*": {"origins": getattr(settings, "CORS_ORIGINS", ["*"])}})

    db_config = getattr(settings, "DB_CONFIG")
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        target = DBConfig.from_dict(db_config)
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(target)
            logger.info("Schema ready (tables=%d)", len(list_tables(target)))
        if getattr(settings, "AUTO_SEED_DB", False):
            ensure_demo_data(target)
        container = build_container(db_config=db_config, settings=settings)

    register_error_handlers(app)
    register_users(app, container)
    register_courses(app, container)
    register_sessions(app, container)
    register_attendance(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
