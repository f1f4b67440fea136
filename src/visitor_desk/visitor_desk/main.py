from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_HOURS, DEFAULT_TICKET_PREFIX
from .library.controller import register as register_library
from .reports.controller import register as register_reports
from .users.controller import register as register_users
from .visitors.controller import register as register_visitors

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(hours=int(getattr(settings, "SESSION_HOURS", DEFAULT_SESSION_HOURS)))

    configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))
    logger.info("starting visitor desk (settings=%s)", settings_module)

    container = container or build_container(ticket_prefix=getattr(settings, "TICKET_PREFIX", DEFAULT_TICKET_PREFIX))

    if bool(getattr(settings, "SEED_ADMIN", False)):
        password = getattr(settings, "ADMIN_PASSWORD", None)
        if not password:
            raise RuntimeError("SEED_ADMIN is on but ADMIN_PASSWORD is not set")
        admin = container.user_service.ensure_admin(
            username=settings.ADMIN_USERNAME,
            password=password,
            full_name=getattr(settings, "ADMIN_FULL_NAME", "Administrator"),
        )
        logger.info("bootstrap admin account: %s", admin.username)

    register_users(app, container)
    register_visitors(app, container)
    register_library(app, container)
    register_reports(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return jsonify({"message": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return jsonify({"message": "Method not allowed"}), 405

    app.extensions["visitor_desk"] = container
    return app
