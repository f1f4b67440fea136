from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.visitor_desk.visitor_desk.container import build_container
from src.visitor_desk.visitor_desk.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 11, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(username: str = "admin", password: str = "admin-pass"):
        res = client.post("/api/auth/login", json={"username": username, "password": password})
        assert res.status_code == 200, res.get_json()
        return res.get_json()["user"]

    return _login


@pytest.fixture
def staff_client(app, container):
    """Client factory signed in as a fresh account with the given role."""

    def _make(role):
        username = f"{role.value.lower()}-user"
        if not container.users_repo.get_by_username(username):
            container.user_service.create_account(
                username=username,
                password="secret-pw",
                full_name=f"{role.value} User",
                role=role,
                allow_admin=True,
            )
        c = app.test_client()
        res = c.post("/api/auth/login", json={"username": username, "password": "secret-pw"})
        assert res.status_code == 200
        return c

    return _make
