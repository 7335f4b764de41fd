"""Flask glue shared by the feature controllers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import DomainError
from ..users.model import Identity
from ..users.tokens import TokenService

logger = logging.getLogger(__name__)


def bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return None
    return header[len("Bearer "):].strip() or None


def role_required(tokens: TokenService, role: Role):
    """Decorator: verify the bearer token and expose the caller as ``g.identity``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.identity = tokens.authorize(bearer_token(), required_role=role)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_identity() -> Identity:
    return g.identity


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        if exc.status_code >= 500:
            logger.error("Request %s %s failed: %s", request.method, request.path, exc)
        return jsonify({"error": str(exc)}), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500
