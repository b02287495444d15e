from __future__ import annotations

from flask import Flask, flash, redirect, render_template, url_for

from ..common.views import flash_error, form_dict, page_arg, role_required
from ..container import Container
from ..core.enums import PayrollItemScope, PayrollItemType, PayrollStatus, Role
from .service import PayrollItemView, PayrollView

PAYROLL_FIELDS = ("employee_id", "salary_id", "pay_date", "status")
ITEM_FIELDS = ("employee_id", "payroll_cycles_id", "scope", "type", "category", "amount")


def register(app: Flask, container: Container) -> None:
    hr_only = role_required(Role.ADMIN.value, Role.HR.value)

    @app.route("/payroll", endpoint="payrolls")
    @hr_only
    def payrolls():
        try:
            view = container.payroll_service.load(page_arg())
        except Exception as e:
            flash_error(e, "Failed to fetch payroll data")
            view = PayrollView(payrolls=[], employees=[], salaries=[], payroll_items=[])
        return render_template(
            "payroll/list.html",
            view=view,
            statuses=[s.value for s in PayrollStatus],
            active_page="payroll",
        )

    @app.route("/payroll/add", methods=["POST"], endpoint="add_payroll")
    @hr_only
    def add_payroll():
        try:
            container.payroll_service.add_payroll(form_dict(*PAYROLL_FIELDS))
            flash("Payroll added successfully!", "success")
        except Exception as e:
            flash_error(e, "Failed to add payroll")
        return redirect(url_for("payrolls"))

    @app.route("/payroll/<int:payroll_id>/edit", methods=["POST"], endpoint="edit_payroll")
    @hr_only
    def edit_payroll(payroll_id: int):
        try:
            container.payroll_service.edit_payroll(payroll_id, form_dict(*PAYROLL_FIELDS))
            flash("Payroll updated successfully!", "success")
        except Exception as e:
            flash_error(e, "Failed to update payroll")
        return redirect(url_for("payrolls"))

    @app.route("/payroll/<int:payroll_id>/delete", methods=["POST"], endpoint="delete_payroll")
    @hr_only
    def delete_payroll(payroll_id: int):
        try:
            container.payroll_service.remove_payroll(payroll_id)
            flash("Payroll deleted.", "info")
        except Exception as e:
            flash_error(e, "Failed to delete payroll")
        return redirect(url_for("payrolls"))

    @app.route("/payroll/items", endpoint="payroll_items")
    @hr_only
    def payroll_items():
        try:
            view = container.payroll_item_service.load()
        except Exception as e:
            flash_error(e, "Failed to load payroll items")
            view = PayrollItemView(payroll_items=[], employees=[], payroll_cycles=[])
        return render_template(
            "payroll/items.html",
            view=view,
            item_types=[t.value for t in PayrollItemType],
            scopes=[s.value for s in PayrollItemScope],
            active_page="payroll_items",
        )

    @app.route("/payroll/items/add", methods=["POST"], endpoint="add_payroll_item")
    @hr_only
    def add_payroll_item():
        try:
            container.payroll_item_service.add_payroll_item(form_dict(*ITEM_FIELDS))
            flash("Payroll item added successfully!", "success")
        except Exception as e:
            flash_error(e, "Failed to add payroll item")
        return redirect(url_for("payroll_items"))

    @app.route("/payroll/items/<int:item_id>/edit", methods=["POST"], endpoint="edit_payroll_item")
    @hr_only
    def edit_payroll_item(item_id: int):
        try:
            container.payroll_item_service.edit_payroll_item(item_id, form_dict(*ITEM_FIELDS))
            flash("Payroll item updated successfully!", "success")
        except Exception as e:
            flash_error(e, "Failed to update payroll item")
        return redirect(url_for("payroll_items"))

    @app.route("/payroll/items/<int:item_id>/delete", methods=["POST"], endpoint="delete_payroll_item")
    @hr_only
    def delete_payroll_item(item_id: int):
        try:
            container.payroll_item_service.remove_payroll_item(item_id)
            flash("Payroll item deleted.", "info")
        except Exception as e:
            flash_error(e, "Failed to delete payroll item")
        return redirect(url_for("payroll_items"))
