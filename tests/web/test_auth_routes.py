from __future__ import annotations

from conftest import FakeResponse
from payroll_portal.auth.controller import safe_redirect_target
from payroll_portal.middleware import guard_redirect


def _cookie(client, name):
    return client.get_cookie(name)


def test_guard_sends_anonymous_users_to_login():
    assert guard_redirect("/payroll/payslips", None, None) == "/login?redirect=/payroll/payslips"
    assert guard_redirect("/register", None, None) is None


def test_guard_bounces_logged_in_users_off_login():
    assert guard_redirect("/login", "tok", "http://localhost/employees") == "http://localhost/employees"
    assert guard_redirect("/login", "tok", "http://localhost/login") == "/dashboard"
    assert guard_redirect("/login", "tok", None) == "/dashboard"


def test_safe_redirect_target_rejects_other_hosts():
    assert safe_redirect_target("/salary") == "/salary"
    assert safe_redirect_target("https://evil.example.com/") == "/dashboard"
    assert safe_redirect_target("//evil.example.com") == "/dashboard"
    assert safe_redirect_target(None) == "/dashboard"


def test_protected_page_redirects_to_login(client):
    resp = client.get("/employees")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login?redirect=/employees")


def test_api_login_sets_cookies(client, session):
    user = {"id": 1, "firstname": "Ana", "role_name": "HR", "employee_id": 3}
    session.routes[("POST", "/login")] = FakeResponse(200, {"access_token": "tok-1", "user": user})

    resp = client.post("/api/login", json={"email": "ana@example.com", "password": "secret123"})

    assert resp.status_code == 200
    assert resp.get_json()["access_token"] == "tok-1"
    assert _cookie(client, "auth_token").value == "tok-1"
    assert client.get("/api/auth-data").get_json()["user"]["role_name"] == "HR"
    assert "Authorization" not in session.calls[0]["headers"]


def test_api_login_failure_is_401(client, session):
    session.routes[("POST", "/login")] = FakeResponse(401, {"message": "Invalid credentials"})

    resp = client.post("/api/login", json={"email": "ana@example.com", "password": "wrong"})

    assert resp.status_code == 401
    assert resp.get_json() == {"message": "Login failed"}


def test_api_register_password_mismatch(client, session):
    resp = client.post(
        "/api/register",
        json={"name": "Ana", "email": "a@b.c", "password": "secret123", "password_confirmation": "other"},
    )

    assert resp.status_code == 422
    assert session.calls == []


def test_api_register_passes_backend_status(client, session):
    session.routes[("POST", "/register")] = FakeResponse(422, {"message": "The email has already been taken."})

    resp = client.post(
        "/api/register",
        json={"name": "Ana", "email": "a@b.c", "password": "secret123", "password_confirmation": "secret123"},
    )

    assert resp.status_code == 422
    assert resp.get_json()["message"] == "The email has already been taken."


def test_api_logout_clears_cookies(login_as):
    client = login_as("Admin")

    resp = client.post("/api/logout")

    assert resp.get_json() == {"message": "Logged out successfully"}
    assert _cookie(client, "auth_token") is None


def test_auth_data_reads_cookies(login_as):
    client = login_as("HR", employee_id=7)

    data = client.get("/api/auth-data").get_json()

    assert data["token"] == "tok-123"
    assert data["user"]["employee_id"] == 7


def test_login_form_honours_redirect(client, session):
    session.routes[("POST", "/login")] = FakeResponse(200, {"access_token": "tok-2", "user": {"id": 1}})

    resp = client.post("/login?redirect=/salary", data={"email": "a@b.c", "password": "secret123"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/salary")


def test_logout_requires_post(login_as):
    client = login_as("Admin")

    assert client.get("/logout").status_code == 405
    assert _cookie(client, "auth_token") is not None

    resp = client.post("/logout")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")
    assert _cookie(client, "auth_token") is None
