from __future__ import annotations

import importlib
import sys
import types

import pytest

import config
import config.production
from src.visitor_desk.visitor_desk.container import build_container
from src.visitor_desk.visitor_desk.main import create_app


@pytest.fixture
def production_settings(monkeypatch):
    for name in ("SEED_ADMIN", "ADMIN_USERNAME", "ADMIN_PASSWORD", "SECRET_KEY"):
        monkeypatch.delenv(name, raising=False)
    yield importlib.reload(config.production)
    monkeypatch.undo()
    importlib.reload(config.production)


def test_production_starts_without_an_admin_account(production_settings):
    container = build_container()
    app = create_app(container=container, settings_module="config.production")

    assert production_settings.SEED_ADMIN is False
    assert container.user_service.list_users() == []
    res = app.test_client().post("/api/auth/login", json={"username": "admin", "password": "please-set-ADMIN_PASSWORD"})
    assert res.status_code == 401


def test_seeding_without_admin_password_refuses_to_start(monkeypatch):
    settings = types.ModuleType("visitor_desk_unseeded_settings")
    settings.SECRET_KEY = "s"
    settings.SEED_ADMIN = True
    settings.ADMIN_USERNAME = "admin"
    settings.ADMIN_PASSWORD = ""
    monkeypatch.setitem(sys.modules, settings.__name__, settings)

    with pytest.raises(RuntimeError):
        create_app(container=build_container(), settings_module=settings.__name__)


def test_production_seeds_with_password_from_environment(monkeypatch, production_settings):
    monkeypatch.setenv("SEED_ADMIN", "1")
    monkeypatch.setenv("ADMIN_PASSWORD", "from-env-pw")
    importlib.reload(config.production)
    container = build_container()

    app = create_app(container=container, settings_module="config.production")

    res = app.test_client().post("/api/auth/login", json={"username": "admin", "password": "from-env-pw"})
    assert res.status_code == 200


@pytest.mark.parametrize(
    "env, expected",
    [
        ("prod", "config.production"),
        ("Production", "config.production"),
        ("test", "config.testing"),
        ("staging", "config.development"),
        ("", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert config.get_settings_module() == expected
