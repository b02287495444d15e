from __future__ import annotations

from flask import Flask, flash, redirect, render_template, url_for

from ..common.views import flash_error, form_dict, role_required
from ..container import Container
from ..core.enums import Role
from .service import UserView

USER_FIELDS = (
    "lastname",
    "firstname",
    "middlename",
    "extension",
    "email",
    "phone_number",
    "company_id_number",
    "role_name",
    "password",
    "password_confirmation",
)


def register(app: Flask, container: Container) -> None:
    admin_only = role_required(Role.ADMIN.value)

    @app.route("/users", endpoint="users")
    @admin_only
    def users():
        try:
            view = container.user_service.load()
        except Exception as e:
            flash_error(e, "Failed to load users")
            view = UserView(users=[])
        return render_template("users/list.html", view=view, roles=[r.value for r in Role], active_page="users")

    @app.route("/users/add", methods=["POST"], endpoint="add_user")
    @admin_only
    def add_user():
        try:
            container.user_service.add_user(form_dict(*USER_FIELDS))
            flash("User added successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while adding user")
        return redirect(url_for("users"))

    @app.route("/users/<int:user_id>/edit", methods=["POST"], endpoint="edit_user")
    @admin_only
    def edit_user(user_id: int):
        try:
            container.user_service.edit_user(user_id, form_dict(*USER_FIELDS))
            flash("User updated successfully!", "success")
        except Exception as e:
            flash_error(e, "System error while updating user")
        return redirect(url_for("users"))

    @app.route("/users/<int:user_id>/delete", methods=["POST"], endpoint="delete_user")
    @admin_only
    def delete_user(user_id: int):
        try:
            container.user_service.remove_user(user_id)
            flash("User deleted.", "info")
        except Exception as e:
            flash_error(e, "System error while deleting user")
        return redirect(url_for("users"))
