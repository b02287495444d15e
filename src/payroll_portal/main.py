from __future__ import annotations

import importlib
import logging
import os
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, has_request_context, render_template, request

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .common.money import format_currency
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import AUTH_TOKEN_COOKIE
from .core.logging import configure_logging
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .middleware import register as register_middleware
from .organization.controller import register as register_organization
from .payroll.controller import register as register_payroll
from .payroll_cycles.controller import register as register_payroll_cycles
from .payslips.controller import register as register_payslips
from .salaries.controller import register as register_salaries
from .shifts.controller import register as register_shifts
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SETTING_KEYS = (
    "API_BASE_URL",
    "API_TIMEOUT",
    "DEBUG",
    "TESTING",
    "SESSION_COOKIE_SECURE",
    "AUTH_COOKIE_MAX_AGE",
    "LOG_LEVEL",
    "CURRENCY",
    "ITEMS_PER_PAGE",
)


def _request_token() -> Optional[str]:
    if not has_request_context():
        return None
    return request.cookies.get(AUTH_TOKEN_COOKIE) or None


def create_app(overrides: Optional[Mapping[str, Any]] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    for key in SETTING_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    app.config.update(overrides or {})

    configure_logging(str(app.config.get("LOG_LEVEL", "INFO")))
    logger.info("Starting with settings=%s api=%s", settings_module, app.config.get("API_BASE_URL"))

    container = container or build_container(
        api_base_url=app.config["API_BASE_URL"],
        timeout=float(app.config.get("API_TIMEOUT", 30)),
        token_provider=_request_token,
        currency=app.config.get("CURRENCY", "PHP"),
    )
    app.extensions["container"] = container

    @app.template_filter("money")
    def money(value):
        return format_currency(value, app.config.get("CURRENCY", "PHP"))

    register_middleware(app)
    register_auth(app, container)
    register_dashboard(app, container)
    register_users(app, container)
    register_employees(app, container)
    register_organization(app, container)
    register_shifts(app, container)
    register_attendance(app, container)
    register_salaries(app, container)
    register_payroll(app, container)
    register_payroll_cycles(app, container)
    register_payslips(app, container)

    @app.errorhandler(403)
    def forbidden(_e):
        return render_template("403.html"), 403

    @app.errorhandler(404)
    def not_found(_e):
        return render_template("404.html"), 404

    return app


def run() -> None:
    app = create_app()
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=bool(app.config.get("DEBUG")))


if __name__ == "__main__":
    run()
