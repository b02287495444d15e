from __future__ import annotations

import csv
import io
import logging

import pandas as pd
from flask import Flask, flash, jsonify, redirect, render_template, request, send_file, url_for

from ..common.datetime_utils import now_local
from ..common.listing import build_table
from ..common.views import current_employee_id, flash_error, page_arg, role_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .service import AttendanceView

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "Employee",
    "Date",
    "Clock In",
    "Clock In Location",
    "Clock Out",
    "Clock Out Location",
    "Worked Hours",
]
SEARCH_FIELDS = ("employee.user.lastname", "employee.user.firstname", "date", "clock_in_location")
SORT_KEYS = ("date", "employee.user.lastname", "clock_in", "clock_out", "worked_hours")


def register(app: Flask, container: Container) -> None:
    hr_only = role_required(Role.ADMIN.value, Role.HR.value)

    def _location() -> str | None:
        """Prefer a typed location; otherwise reverse-geocode the browser's coordinates."""
        typed = (request.form.get("location") or "").strip()
        if typed:
            return typed
        lat, lon = request.form.get("latitude"), request.form.get("longitude")
        if not lat or not lon:
            return None
        try:
            return container.geocoder.describe(float(lat), float(lon))
        except ValueError:
            return None

    @app.route("/attendance/time-clock", endpoint="time_clock")
    def time_clock():
        employee_id = current_employee_id()
        record = None
        hours_this_month = 0.0
        if employee_id is None:
            flash("Your account is not linked to an employee record.", "warning")
        else:
            try:
                today = now_local().date()
                record = container.attendance_service.today_record(employee_id, today=today)
                hours_this_month = container.attendance_service.total_hours_in_period(
                    employee_id, today.replace(day=1).isoformat(), today.isoformat()
                )
            except Exception as e:
                flash_error(e, "Failed to load today's attendance")
        return render_template(
            "attendance/time_clock.html",
            record=record,
            hours_this_month=hours_this_month,
            active_page="time_clock",
        )

    @app.route("/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in():
        employee_id = current_employee_id()
        try:
            if employee_id is None:
                raise ValidationError("Your account is not linked to an employee record.")
            container.attendance_service.clock_in(employee_id, location=_location())
            flash("Successfully clocked in!", "success")
        except Exception as e:
            flash_error(e, "Failed to clock in.")
        return redirect(url_for("time_clock"))

    @app.route("/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    def clock_out():
        employee_id = current_employee_id()
        try:
            if employee_id is None:
                raise ValidationError("Your account is not linked to an employee record.")
            attendance_id = int(request.form.get("attendance_id") or 0)
            container.attendance_service.clock_out(attendance_id, employee_id=employee_id, location=_location())
            flash("Successfully clocked out!", "success")
        except Exception as e:
            flash_error(e, "Failed to clock out.")
        return redirect(url_for("time_clock"))

    @app.route("/attendance", endpoint="attendance_list")
    @hr_only
    def attendance_list():
        try:
            view = container.attendance_service.load()
        except Exception as e:
            flash_error(e, "Failed to load attendance records")
            view = AttendanceView(attendances=[], employees=[])

        table = build_table(
            view.attendances,
            term=request.args.get("q"),
            search_fields=SEARCH_FIELDS,
            sort_key=request.args.get("sort", "date"),
            direction=request.args.get("dir", "desc"),
            allowed_sort_keys=SORT_KEYS,
            page=page_arg(),
            per_page=int(app.config.get("ITEMS_PER_PAGE", 10)),
        )
        return render_template("attendance/list.html", view=view, table=table, active_page="attendance")

    @app.route("/attendance/add", methods=["POST"], endpoint="add_attendance")
    @hr_only
    def add_attendance():
        data = {
            "employee_id": int(request.form.get("employee_id") or 0) or None,
            "date": request.form.get("date", ""),
            "clock_in": request.form.get("clock_in", ""),
            "clock_in_location": request.form.get("clock_in_location") or None,
        }
        try:
            container.attendance_service.add_attendance(data)
            flash("Attendance added successfully!", "success")
        except Exception as e:
            flash_error(e, "Failed to add attendance.")
        return redirect(url_for("attendance_list"))

    @app.route("/attendance/<int:attendance_id>/edit", methods=["POST"], endpoint="edit_attendance")
    @hr_only
    def edit_attendance(attendance_id: int):
        data = {
            k: request.form.get(k) or None
            for k in ("date", "clock_in", "clock_in_location", "clock_out", "clock_out_location")
        }
        try:
            container.attendance_service.edit_attendance(attendance_id, {k: v for k, v in data.items() if v})
            flash("Attendance updated successfully!", "success")
        except Exception as e:
            flash_error(e, "Failed to edit attendance.")
        return redirect(url_for("attendance_list"))

    @app.route("/attendance/export.csv", endpoint="export_attendance_csv")
    @hr_only
    def export_attendance_csv():
        try:
            rows = container.attendance_service.export_rows()
        except Exception as e:
            flash_error(e, "Failed to export attendance")
            return redirect(url_for("attendance_list"))

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_COLUMNS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=attendance.csv"},
        )

    @app.route("/attendance/export.xlsx", endpoint="export_attendance_xlsx")
    @hr_only
    def export_attendance_xlsx():
        try:
            rows = container.attendance_service.export_rows()
            df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
            out = io.BytesIO()
            with pd.ExcelWriter(out, engine="openpyxl") as writer:
                df.to_excel(writer, index=False, sheet_name="Attendance")
            out.seek(0)
        except Exception as e:
            flash_error(e, "Failed to export attendance")
            return redirect(url_for("attendance_list"))
        return send_file(
            out,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name="attendance.xlsx",
        )

    @app.route("/api/attendance/hours", endpoint="api_attendance_hours")
    def api_attendance_hours():
        employee_id = current_employee_id()
        start, end = request.args.get("start", ""), request.args.get("end", "")
        if employee_id is None or not start or not end:
            return jsonify({"success": False, "message": "employee, start and end are required"}), 400
        try:
            total = container.attendance_service.total_hours_in_period(employee_id, start, end)
        except Exception:
            logger.exception("Failed to total attendance hours")
            return jsonify({"success": False, "message": "System error"}), 500
        return jsonify({"success": True, "employee_id": employee_id, "total_hours": round(total, 2)})
