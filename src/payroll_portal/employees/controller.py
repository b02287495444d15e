from __future__ import annotations

from typing import Any

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..common.listing import build_table
from ..common.views import flash_error, indexed_rows, page_arg, role_required
from ..container import Container
from ..core.enums import EmployeeStatus, Role
from .service import EmployeeView

EMPLOYEE_FIELDS = (
    "user_id",
    "company_id_number",
    "department_id",
    "designation_id",
    "status",
    "birthdate",
    "reports_to",
    "gender",
    "resignation_date",
    "address",
    "sss_id",
    "philhealth_id",
    "pagibig_id",
    "tin",
)
SEARCH_FIELDS = (
    "company_id_number",
    "user.lastname",
    "user.firstname",
    "department.department",
    "designation.designation",
    "status",
)
SORT_KEYS = ("company_id_number", "user.lastname", "department.department", "designation.designation", "status")


def _filled(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    # the form always renders one blank row for adding
    return [r for r in rows if any(v for k, v in r.items() if k != "id")]


def _employee_form() -> dict[str, Any]:
    data: dict[str, Any] = {f: (request.form.get(f) or "").strip() or None for f in EMPLOYEE_FIELDS}
    data["dependents"] = _filled(indexed_rows("dependents", ("id", "name", "relationship")))
    data["education_background"] = _filled(indexed_rows("education_background", ("id", "attainment", "course")))

    documents = []
    for doc in indexed_rows("documents", ("id", "type", "file")):
        f = doc.get("file")
        if f is not None and not getattr(f, "filename", ""):
            doc.pop("file")
        documents.append(doc)
    data["documents"] = documents
    return data


def register(app: Flask, container: Container) -> None:
    hr_only = role_required(Role.ADMIN.value, Role.HR.value)

    def _form_view() -> EmployeeView:
        try:
            return container.employee_service.load()
        except Exception as e:
            flash_error(e, "Failed to load employee form data")
            return EmployeeView(employees=[], users_without_employee=[], departments=[], designations=[])

    @app.route("/employees", endpoint="employees")
    @hr_only
    def employees():
        try:
            view = container.employee_service.load()
        except Exception as e:
            flash_error(e, "Failed to load employees")
            view = EmployeeView(employees=[], users_without_employee=[], departments=[], designations=[])

        table = build_table(
            view.employees,
            term=request.args.get("q"),
            search_fields=SEARCH_FIELDS,
            sort_key=request.args.get("sort"),
            direction=request.args.get("dir", "asc"),
            allowed_sort_keys=SORT_KEYS,
            page=page_arg(),
            per_page=int(app.config.get("ITEMS_PER_PAGE", 10)),
        )
        return render_template("employees/list.html", view=view, table=table, active_page="employees")

    @app.route("/employees/add", methods=["GET", "POST"], endpoint="add_employee")
    @hr_only
    def add_employee():
        if request.method == "POST":
            try:
                container.employee_service.add_employee(_employee_form())
                flash("Employee added successfully!", "success")
                return redirect(url_for("employees"))
            except Exception as e:
                flash_error(e, "System error while adding employee")

        return render_template(
            "employees/form.html",
            view=_form_view(),
            employee=None,
            statuses=[s.value for s in EmployeeStatus],
            active_page="employees",
        )

    @app.route("/employees/<int:employee_id>/edit", methods=["GET", "POST"], endpoint="edit_employee")
    @hr_only
    def edit_employee(employee_id: int):
        if request.method == "POST":
            try:
                container.employee_service.edit_employee(employee_id, _employee_form())
                flash("Employee updated successfully!", "success")
                return redirect(url_for("employees"))
            except Exception as e:
                flash_error(e, "System error while updating employee")

        try:
            employee = container.employee_service.get(employee_id)
        except Exception as e:
            flash_error(e, "Failed to load employee")
            return redirect(url_for("employees"))
        if employee is None:
            abort(404)
        return render_template(
            "employees/form.html",
            view=_form_view(),
            employee=employee,
            statuses=[s.value for s in EmployeeStatus],
            active_page="employees",
        )

    @app.route("/employees/<int:employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    @hr_only
    def delete_employee(employee_id: int):
        try:
            container.employee_service.remove_employee(employee_id)
            flash("Employee deleted.", "info")
        except Exception as e:
            flash_error(e, "System error while deleting employee")
        return redirect(url_for("employees"))

    @app.route(
        "/employees/<int:employee_id>/<string:kind>/<int:record_id>/delete",
        methods=["POST"],
        endpoint="delete_employee_record",
    )
    @hr_only
    def delete_employee_record(employee_id: int, kind: str, record_id: int):
        removers = {
            "education": container.employee_service.remove_education_background,
            "dependent": container.employee_service.remove_dependent,
            "document": container.employee_service.remove_document,
        }
        remove = removers.get(kind)
        if remove is None:
            abort(404)
        try:
            remove(record_id)
            flash("Record removed.", "info")
        except Exception as e:
            flash_error(e, "System error while removing record")
        return redirect(url_for("edit_employee", employee_id=employee_id))
