from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .dashboard.controller import register as register_dashboard
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_BASE_URL"] = getattr(settings, "API_BASE_URL")
    app.config["API_TIMEOUT_SECONDS"] = float(getattr(settings, "API_TIMEOUT_SECONDS", 20))
    app.config["NOTIFY_BACKEND_ON_LOGOUT"] = bool(getattr(settings, "NOTIFY_BACKEND_ON_LOGOUT", False))
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", 7)))

    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s backend=%s", settings_module, app.config["API_BASE_URL"])

    if container is None:
        container = build_container(
            api_base_url=app.config["API_BASE_URL"],
            timeout=app.config["API_TIMEOUT_SECONDS"],
        )

    register_auth(app, container)
    register_dashboard(app, container)
    register_students(app, container)
    register_attendance(app, container)

    return app
