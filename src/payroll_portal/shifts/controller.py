from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.views import flash_error, role_required
from ..container import Container
from ..core.enums import Role
from .model import DaySchedule
from .service import WEEK_DAYS, ShiftView


def _shift_form() -> dict:
    schedule = [
        DaySchedule(
            day=day,
            is_rest_day=request.form.get(f"rest_{day}") == "on",
            hours=(request.form.get(f"hours_{day}") or "").strip(),
        )
        for day in WEEK_DAYS
    ]
    return {
        "employee_ids": request.form.getlist("employee_ids"),
        "start_date": request.form.get("start_date", ""),
        "end_date": request.form.get("end_date", ""),
        "description": request.form.get("description", "").strip(),
        "schedule_settings": schedule,
    }


def register(app: Flask, container: Container) -> None:
    hr_only = role_required(Role.ADMIN.value, Role.HR.value)

    @app.route("/attendance/shifts", endpoint="shifts")
    @hr_only
    def shifts():
        try:
            view = container.shift_service.load()
        except Exception as e:
            flash_error(e, "Failed to load shifts")
            view = ShiftView(shifts=[], employees=[], available_employees=[])
        return render_template("shifts/list.html", view=view, week_days=WEEK_DAYS, active_page="shifts")

    @app.route("/attendance/shifts/add", methods=["POST"], endpoint="add_shift")
    @hr_only
    def add_shift():
        try:
            container.shift_service.add_shift(_shift_form())
            flash("Shift created successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while creating shift")
        return redirect(url_for("shifts"))

    @app.route("/attendance/shifts/<int:shift_id>/edit", methods=["POST"], endpoint="edit_shift")
    @hr_only
    def edit_shift(shift_id: int):
        try:
            container.shift_service.edit_shift(shift_id, _shift_form())
            flash("Shift updated successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while updating shift")
        return redirect(url_for("shifts"))

    @app.route("/attendance/shifts/<int:shift_id>/delete", methods=["POST"], endpoint="delete_shift")
    @hr_only
    def delete_shift(shift_id: int):
        try:
            container.shift_service.remove_shift(shift_id)
            flash("Shift deleted.", "info")
        except Exception as e:
            flash_error(e, "System error while deleting shift")
        return redirect(url_for("shifts"))
