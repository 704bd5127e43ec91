from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container
from .core.exceptions import AuthorizationError, ConflictError, DomainError, NotFoundError, ValidationError
from .activities.controller import register as register_activities
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .leave.controller import register as register_leave
from .timeline.controller import register as register_timeline
from .timesheets.controller import register as register_timesheets

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    ValidationError: 400,
    AuthorizationError: 403,
    NotFoundError: 404,
    ConflictError: 409,
}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in _STATUS_BY_ERROR.items() if isinstance(e, cls)), 400)
        logger.info("%s -> %d: %s", type(e).__name__, status, e)
        return jsonify({"success": False, "message": str(e)}), status

    @app.errorhandler(404)
    def handle_not_found(e):
        return jsonify({"success": False, "message": "Not found"}), 404


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("chronolog starting (settings=%s, timezone=%s)", settings_module, getattr(settings, "TIMEZONE", "local"))

    container = build_container(settings)
    app.extensions["chronolog"] = container

    register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)
    register_activities(app, container)
    register_timeline(app, container)
    register_timesheets(app, container)
    register_leave(app, container)

    return app
