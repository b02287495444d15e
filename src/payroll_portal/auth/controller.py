from __future__ import annotations

import logging
from urllib.parse import urlparse

from flask import Flask, flash, g, jsonify, make_response, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import DEFAULT_AFTER_LOGIN
from ..core.exceptions import ApiError, AuthenticationError, ValidationError
from .cookies import clear_auth_cookies, read_auth_state, set_auth_cookies

logger = logging.getLogger(__name__)


def safe_redirect_target(target: str | None) -> str:
    """Only same-site relative paths are followed after login."""
    if not target:
        return DEFAULT_AFTER_LOGIN
    parsed = urlparse(target)
    if parsed.scheme or parsed.netloc or not target.startswith("/") or target.startswith("//"):
        return DEFAULT_AFTER_LOGIN
    return target


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="home")
    def home():
        if g.auth.is_authenticated:
            return redirect(url_for("dashboard"))
        return redirect(url_for("login"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        next_path = request.args.get("redirect") or request.form.get("redirect") or ""
        if request.method == "POST":
            email = request.form.get("email", "")
            try:
                result = container.auth_service.login(email, request.form.get("password", ""))
                response = make_response(redirect(safe_redirect_target(next_path)))
                set_auth_cookies(response, result.token, result.user)
                flash("Logged in successfully.", "success")
                return response
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error during login")
                flash("System error while logging in", "danger")

        return render_template("login.html", redirect_to=next_path)

    @app.route("/register", methods=["GET", "POST"], endpoint="register")
    def register_page():
        if request.method == "POST":
            data = {k: request.form.get(k, "") for k in ("name", "email", "password", "password_confirmation")}
            try:
                result = container.auth_service.register(data)
                response = make_response(redirect(DEFAULT_AFTER_LOGIN))
                set_auth_cookies(response, result.token, result.user)
                flash("Account created.", "success")
                return response
            except (ValidationError, ApiError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error during registration")
                flash("System error while registering", "danger")

        return render_template("register.html")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        response = make_response(redirect(url_for("login")))
        clear_auth_cookies(response)
        flash("You have been logged out.", "info")
        return response

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        body = request.get_json(silent=True) or {}
        try:
            result = container.auth_service.login(body.get("email", ""), body.get("password", ""))
        except AuthenticationError:
            return jsonify({"message": "Login failed"}), 401
        except Exception:
            logger.exception("Unexpected error during API login")
            return jsonify({"message": "Login failed"}), 401

        response = make_response(jsonify(result.payload), 200)
        set_auth_cookies(response, result.token, result.user)
        return response

    @app.route("/api/register", methods=["POST"], endpoint="api_register")
    def api_register():
        body = request.get_json(silent=True) or {}
        try:
            result = container.auth_service.register(body)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 422
        except ApiError as e:
            return jsonify({"message": str(e) or "Registration failed"}), e.status or 500

        response = make_response(jsonify(result.payload), 200)
        set_auth_cookies(response, result.token, result.user)
        return response

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        response = make_response(jsonify({"message": "Logged out successfully"}), 200)
        clear_auth_cookies(response)
        return response

    @app.route("/api/auth-data", methods=["GET"], endpoint="api_auth_data")
    def api_auth_data():
        state = read_auth_state(request)
        return jsonify({"token": state.token, "user": state.user})
