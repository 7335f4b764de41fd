from __future__ import annotations

from datetime import datetime

import pytest

from fakes import (
    InMemoryAttendance,
    InMemoryCourses,
    InMemorySessions,
    InMemoryStore,
    InMemoryUsers,
    seed_demo,
)
from session_attendance import create_app
from session_attendance.container import wire_services

JWT_SECRET = "test-secret-key-long-enough-for-hs256-signing"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 10, 9, 15, 0)


@pytest.fixture
def store() -> InMemoryStore:
    return seed_demo(InMemoryStore())


@pytest.fixture
def container(store):
    return wire_services(
        users_repo=InMemoryUsers(store),
        courses_repo=InMemoryCourses(store),
        sessions_repo=InMemorySessions(store),
        attendance_repo=InMemoryAttendance(store),
        jwt_secret=JWT_SECRET,
    )


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="session_attendance.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Log in through the API and return ready-to-use request headers."""

    def _login(username: str, password: str = "123456") -> dict:
        resp = client.post("/api/auth/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return {"Authorization": f"Bearer {resp.get_json()['token']}"}

    return _login
