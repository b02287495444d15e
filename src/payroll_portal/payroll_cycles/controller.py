from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.views import flash_error, form_dict, page_arg, role_required
from ..container import Container
from ..core.enums import Role
from .service import DAY_FIELDS, PayrollCycleView

CONFIG_FIELDS = ("start_year_month",) + DAY_FIELDS + ("pay_date_offset",)


def register(app: Flask, container: Container) -> None:
    admin_only = role_required(Role.ADMIN.value)

    @app.route("/settings/payroll_cycle/cycle", endpoint="payroll_cycles")
    @admin_only
    def payroll_cycles():
        try:
            view = container.payroll_cycle_service.load(page_arg())
        except Exception as e:
            flash_error(e, "Failed to load payroll cycles")
            view = PayrollCycleView(cycles=[], configs=[])
        return render_template(
            "settings/payroll_cycles.html",
            view=view,
            defaults=container.payroll_cycle_service.default_config(),
            active_page="payroll_cycles",
        )

    @app.route("/settings/payroll_cycle/cycle/add", methods=["POST"], endpoint="add_payroll_cycle")
    @admin_only
    def add_payroll_cycle():
        try:
            container.payroll_cycle_service.add_cycle(form_dict("start_date", "end_date", "pay_date"))
            flash("Payroll cycle created.", "success")
        except Exception as e:
            flash_error(e, "Failed to create payroll cycle")
        return redirect(url_for("payroll_cycles"))

    @app.route("/settings/payroll_cycle/cycle/<int:cycle_id>/delete", methods=["POST"], endpoint="delete_payroll_cycle")
    @admin_only
    def delete_payroll_cycle(cycle_id: int):
        try:
            container.payroll_cycle_service.remove_cycle(cycle_id)
            flash("Payroll cycle deleted.", "info")
        except Exception as e:
            flash_error(e, "Failed to delete payroll cycle")
        return redirect(url_for("payroll_cycles"))

    @app.route("/settings/payroll/configuration", endpoint="payroll_configuration")
    @admin_only
    def payroll_configuration():
        try:
            view = container.payroll_cycle_service.load()
        except Exception as e:
            flash_error(e, "Failed to load payroll configuration")
            view = PayrollCycleView(cycles=[], configs=[])
        return render_template(
            "settings/payroll_configuration.html",
            view=view,
            defaults=container.payroll_cycle_service.default_config(),
            active_page="payroll_configuration",
        )

    @app.route("/settings/payroll/configuration/add", methods=["POST"], endpoint="add_payroll_config")
    @admin_only
    def add_payroll_config():
        try:
            container.payroll_cycle_service.add_config(form_dict(*CONFIG_FIELDS))
            flash("Payroll configuration created.", "success")
        except Exception as e:
            flash_error(e, "Failed to create payroll configuration")
        return redirect(url_for("payroll_configuration"))

    @app.route("/settings/payroll/configuration/update", methods=["POST"], endpoint="update_payroll_config")
    @admin_only
    def update_payroll_config():
        try:
            container.payroll_cycle_service.edit_config(request.form.get("id"), form_dict(*CONFIG_FIELDS))
            flash("Payroll configuration updated.", "success")
        except Exception as e:
            flash_error(e, "Failed to update payroll configuration")
        return redirect(url_for("payroll_configuration"))
