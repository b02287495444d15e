from __future__ import annotations

from flask import Flask, flash, redirect, render_template, url_for

from ..common.views import flash_error, form_dict, role_required
from ..container import Container
from ..core.enums import Role
from .service import DepartmentView, DesignationView, HolidayView

HOLIDAY_TYPES = ("Regular Holiday", "Special Non-Working Holiday", "Special Working Holiday")


def register(app: Flask, container: Container) -> None:
    admin_only = role_required(Role.ADMIN.value)

    # departments
    @app.route("/settings/departments", endpoint="departments")
    @admin_only
    def departments():
        try:
            view = container.department_service.load()
        except Exception as e:
            flash_error(e, "Failed to load departments")
            view = DepartmentView(departments=[])
        return render_template("organization/departments.html", view=view, active_page="departments")

    @app.route("/settings/departments/add", methods=["POST"], endpoint="add_department")
    @admin_only
    def add_department():
        try:
            container.department_service.add_department(form_dict("department"))
            flash("Department added successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while adding department")
        return redirect(url_for("departments"))

    @app.route("/settings/departments/<int:department_id>/edit", methods=["POST"], endpoint="edit_department")
    @admin_only
    def edit_department(department_id: int):
        try:
            container.department_service.edit_department(department_id, form_dict("department"))
            flash("Department updated successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while updating department")
        return redirect(url_for("departments"))

    @app.route("/settings/departments/<int:department_id>/delete", methods=["POST"], endpoint="delete_department")
    @admin_only
    def delete_department(department_id: int):
        try:
            container.department_service.remove_department(department_id)
            flash("Department deleted.", "info")
        except Exception as e:
            flash_error(e, "System error while deleting department")
        return redirect(url_for("departments"))

    # designations
    @app.route("/settings/designations", endpoint="designations")
    @admin_only
    def designations():
        try:
            view = container.designation_service.load()
        except Exception as e:
            flash_error(e, "Failed to load designations")
            view = DesignationView(designations=[], departments=[])
        return render_template("organization/designations.html", view=view, active_page="designations")

    @app.route("/settings/designations/add", methods=["POST"], endpoint="add_designation")
    @admin_only
    def add_designation():
        try:
            container.designation_service.add_designation(form_dict("designation", "department_id"))
            flash("Designation added successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while adding designation")
        return redirect(url_for("designations"))

    @app.route("/settings/designations/<int:designation_id>/edit", methods=["POST"], endpoint="edit_designation")
    @admin_only
    def edit_designation(designation_id: int):
        try:
            container.designation_service.edit_designation(designation_id, form_dict("designation", "department_id"))
            flash("Designation updated successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while updating designation")
        return redirect(url_for("designations"))

    @app.route("/settings/designations/<int:designation_id>/delete", methods=["POST"], endpoint="delete_designation")
    @admin_only
    def delete_designation(designation_id: int):
        try:
            container.designation_service.remove_designation(designation_id)
            flash("Designation deleted.", "info")
        except Exception as e:
            flash_error(e, "System error while deleting designation")
        return redirect(url_for("designations"))

    # holidays
    @app.route("/settings/holidays", endpoint="holidays")
    @admin_only
    def holidays():
        try:
            view = container.holiday_service.load()
        except Exception as e:
            flash_error(e, "Failed to load holidays")
            view = HolidayView(holidays=[])
        return render_template("organization/holidays.html", view=view, holiday_types=HOLIDAY_TYPES, active_page="holidays")

    @app.route("/settings/holidays/add", methods=["POST"], endpoint="add_holiday")
    @admin_only
    def add_holiday():
        try:
            container.holiday_service.add_holiday(form_dict("name_holiday", "date_holiday", "type_holiday"))
            flash("Holiday added successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while adding holiday")
        return redirect(url_for("holidays"))

    @app.route("/settings/holidays/<int:holiday_id>/edit", methods=["POST"], endpoint="edit_holiday")
    @admin_only
    def edit_holiday(holiday_id: int):
        try:
            container.holiday_service.edit_holiday(holiday_id, form_dict("name_holiday", "date_holiday", "type_holiday"))
            flash("Holiday updated successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while updating holiday")
        return redirect(url_for("holidays"))

    @app.route("/settings/holidays/<int:holiday_id>/delete", methods=["POST"], endpoint="delete_holiday")
    @admin_only
    def delete_holiday(holiday_id: int):
        try:
            container.holiday_service.remove_holiday(holiday_id)
            flash("Holiday deleted.", "info")
        except Exception as e:
            flash_error(e, "System error while deleting holiday")
        return redirect(url_for("holidays"))
