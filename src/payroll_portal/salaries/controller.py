from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.listing import build_table
from ..common.views import flash_error, form_dict, page_arg, role_required
from ..container import Container
from ..core.enums import PayPeriod, Role
from .service import SalaryView

SALARY_FIELDS = ("employee_id", "basic_salary", "pay_period", "start_date", "end_date")


def register(app: Flask, container: Container) -> None:
    hr_only = role_required(Role.ADMIN.value, Role.HR.value)

    @app.route("/salary", endpoint="salaries")
    @hr_only
    def salaries():
        try:
            view = container.salary_service.load()
        except Exception as e:
            flash_error(e, "Failed to load salaries")
            view = SalaryView(salaries=[], employees=[], available_employees=[])

        table = build_table(
            view.salaries,
            term=request.args.get("q"),
            search_fields=("employee.user.lastname", "employee.user.firstname", "pay_period"),
            sort_key=request.args.get("sort"),
            direction=request.args.get("dir", "asc"),
            allowed_sort_keys=("employee.user.lastname", "basic_salary", "pay_period"),
            page=page_arg(),
            per_page=int(app.config.get("ITEMS_PER_PAGE", 10)),
        )
        return render_template(
            "salaries/list.html",
            view=view,
            table=table,
            pay_periods=[p.value for p in PayPeriod],
            active_page="salaries",
        )

    @app.route("/salary/add", methods=["POST"], endpoint="add_salary")
    @hr_only
    def add_salary():
        try:
            container.salary_service.add_salary(form_dict(*SALARY_FIELDS))
            flash("Salary added successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while adding salary")
        return redirect(url_for("salaries"))

    @app.route("/salary/<int:salary_id>/edit", methods=["POST"], endpoint="edit_salary")
    @hr_only
    def edit_salary(salary_id: int):
        try:
            container.salary_service.edit_salary(salary_id, form_dict(*SALARY_FIELDS))
            flash("Salary updated successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while updating salary")
        return redirect(url_for("salaries"))

    @app.route("/salary/<int:salary_id>/delete", methods=["POST"], endpoint="delete_salary")
    @hr_only
    def delete_salary(salary_id: int):
        try:
            container.salary_service.remove_salary(salary_id)
            flash("Salary deleted.", "info")
        except Exception as e:
            flash_error(e, "System error while deleting salary")
        return redirect(url_for("salaries"))
