from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template

from ..common.views import role_required
from ..container import Container
from ..core.enums import Role
from .service import DashboardView, landing_path

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    def dashboard():
        return redirect(landing_path(g.auth.role_name))

    @app.route("/dashboard/admin", endpoint="admin_dashboard")
    @role_required(Role.ADMIN.value, Role.HR.value)
    def admin_dashboard():
        try:
            data = container.dashboard_service.load()
        except Exception:
            logger.exception("Failed to load dashboard")
            flash("Failed to load dashboard data", "danger")
            data = DashboardView()
        return render_template("dashboard/admin.html", data=data, active_page="dashboard")
