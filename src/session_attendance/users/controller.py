from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        result = container.auth_service.authenticate(data.get("username"), data.get("password"))
        return jsonify(
            {
                "token": result.token,
                "role": result.role.value,
                "displayName": result.display_name,
                "username": result.username,
            }
        )
