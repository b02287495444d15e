from __future__ import annotations

import io

import pandas as pd

from conftest import FakeResponse
from payroll_portal.payslips import controller as payslip_controller

PAYSLIP = {
    "id": 1,
    "employee_id": 1,
    "payroll_cycles_id": 7,
    "earnings": "1500.00",
    "deductions": "500.00",
    "gross_salary": "21500.00",
    "net_salary": "21000.00",
    "employee": {"id": 1, "company_id_number": "EMP-1", "user": {"firstname": "Ana", "lastname": "Cruz"}},
    "payroll_cycle": {"id": 7, "start_date": "2025-03-01", "end_date": "2025-03-15", "pay_date": "2025-03-18"},
    "salary": {"id": 3, "basic_salary": "20000.00", "pay_period": "monthly"},
}


def test_employee_cannot_open_admin_pages(login_as):
    client = login_as("Employee")

    assert client.get("/employees").status_code == 403
    assert client.get("/settings/departments").status_code == 403


def test_hr_cannot_open_settings(login_as):
    assert login_as("HR").get("/settings/payroll/configuration").status_code == 403


def test_dashboard_routes_by_role(login_as):
    resp = login_as("Employee").get("/dashboard")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/attendance/time-clock")


def test_bearer_token_comes_from_cookie(login_as, session):
    session.routes[("GET", "/salary")] = FakeResponse(200, [])
    session.routes[("GET", "/employees")] = FakeResponse(200, [])
    session.routes[("GET", "/employees-doesnt-have-salary")] = FakeResponse(200, [])

    resp = login_as("HR", token="cookie-token").get("/salary")

    assert resp.status_code == 200
    assert all(c["headers"]["Authorization"] == "Bearer cookie-token" for c in session.calls)


def test_backend_failure_is_flashed_not_raised(login_as, session):
    session.routes[("GET", "/salary")] = FakeResponse(500, {"message": "Database down"})
    session.routes[("GET", "/employees")] = FakeResponse(200, [])

    resp = login_as("HR").get("/salary")

    assert resp.status_code == 200
    assert b"Database down" in resp.data


def test_employee_payslip_list_is_filtered(login_as, session):
    other = dict(PAYSLIP, id=2, employee_id=2, employee={"id": 2, "company_id_number": "EMP-2", "user": {"firstname": "Ben", "lastname": "Reyes"}})
    session.routes[("GET", "/payslips")] = FakeResponse(200, [PAYSLIP, other])

    resp = login_as("Employee", employee_id=1).get("/payroll/payslips")

    assert resp.status_code == 200
    assert b"Cruz" in resp.data
    assert b"Reyes" not in resp.data


def test_employee_cannot_view_other_payslip(login_as, session):
    session.routes[("GET", "/payslips/1")] = FakeResponse(200, PAYSLIP)

    assert login_as("Employee", employee_id=2).get("/payroll/payslips/view/1").status_code == 403


def test_payslip_view_renders_totals(login_as, session):
    session.routes[("GET", "/payslips/1")] = FakeResponse(200, PAYSLIP)
    session.routes[("GET", "/company-details")] = FakeResponse(200, {"id": 1, "name": "Acme Corp"})
    session.routes[("GET", "/payroll-items")] = FakeResponse(200, [])

    resp = login_as("Employee", employee_id=1).get("/payroll/payslips/view/1")

    assert resp.status_code == 200
    assert "₱21,000.00".encode() in resp.data
    assert b"Acme Corp" in resp.data


def test_missing_payslip_is_404(login_as):
    assert login_as("Admin").get("/payroll/payslips/view/99").status_code == 404


def test_clock_in_posts_attendance(login_as, session):
    session.routes[("GET", "/attendances")] = FakeResponse(200, [])
    session.routes[("POST", "/attendances")] = FakeResponse(
        200, {"id": 1, "employee_id": 1, "date": "2025-03-10", "clock_in": "08:00:00"}
    )

    resp = login_as("Employee", employee_id=1).post("/attendance/clock-in", data={"location": "Front desk"})

    assert resp.status_code == 302
    posted = [c for c in session.calls if c["method"] == "POST"][0]
    assert posted["json"]["employee_id"] == 1
    assert posted["json"]["clock_in_location"] == "Front desk"


def test_clock_out_rejects_another_employees_record(login_as, session):
    session.routes[("GET", "/attendances")] = FakeResponse(
        200, [{"id": 77, "employee_id": 2, "date": "2025-03-10", "clock_in": "08:00:00"}]
    )

    resp = login_as("Employee", employee_id=1).post("/attendance/clock-out", data={"attendance_id": "77", "location": "x"})

    assert resp.status_code == 302
    assert [c for c in session.calls if c["method"] == "PUT"] == []


def test_clock_out_closes_own_record(login_as, session):
    session.routes[("GET", "/attendances")] = FakeResponse(
        200, [{"id": 78, "employee_id": 1, "date": "2025-03-10", "clock_in": "08:00:00"}]
    )
    session.routes[("PUT", "/attendances/78")] = FakeResponse(
        200, {"id": 78, "employee_id": 1, "date": "2025-03-10", "clock_in": "08:00:00", "clock_out": "17:00:00"}
    )

    login_as("Employee", employee_id=1).post("/attendance/clock-out", data={"attendance_id": "78", "location": "Gate 2"})

    puts = [c for c in session.calls if c["method"] == "PUT"]
    assert [c["url"] for c in puts] == ["http://api.test/api/attendances/78"]
    assert puts[0]["json"]["clock_out_location"] == "Gate 2"


ATTENDANCE_ROWS = [
    {
        "id": 1,
        "employee_id": 2,
        "date": "2025-03-10",
        "clock_in": "08:00:00",
        "clock_in_location": "Front desk",
        "clock_out": "17:00:00",
        "worked_hours": "9.0",
    }
]


def test_export_attendance_csv(login_as, session):
    session.routes[("GET", "/attendances")] = FakeResponse(200, ATTENDANCE_ROWS)
    session.routes[("GET", "/employees")] = FakeResponse(200, [])

    resp = login_as("HR").get("/attendance/export.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Employee,Date,Clock In,Clock In Location,Clock Out,Clock Out Location,Worked Hours"
    assert lines[1] == "#2,2025-03-10,08:00:00,Front desk,17:00:00,,9.0"


def test_export_attendance_xlsx(login_as, session):
    session.routes[("GET", "/attendances")] = FakeResponse(200, ATTENDANCE_ROWS)
    session.routes[("GET", "/employees")] = FakeResponse(200, [])

    resp = login_as("Admin").get("/attendance/export.xlsx")

    assert resp.status_code == 200
    assert "attendance.xlsx" in resp.headers["Content-Disposition"]
    df = pd.read_excel(io.BytesIO(resp.data))
    assert list(df.columns)[:3] == ["Employee", "Date", "Clock In"]
    assert df.iloc[0]["Clock In Location"] == "Front desk"


def test_export_is_hr_only(login_as):
    assert login_as("Employee").get("/attendance/export.csv").status_code == 403


def _payslip_routes(session, **user):
    employee = {"id": 1, "company_id_number": "E-1", "user": dict({"firstname": "Ana", "lastname": "De la Cruz"}, **user)}
    session.routes[("GET", "/payslips/1")] = FakeResponse(200, dict(PAYSLIP, employee=employee))
    session.routes[("GET", "/company-details")] = FakeResponse(200, {"id": 1, "name": "Acme Corp"})
    session.routes[("GET", "/payroll-items")] = FakeResponse(200, [])


def test_payslip_pdf_download_name_is_quoted(login_as, session, monkeypatch):
    _payslip_routes(session)
    rendered = []
    monkeypatch.setattr(payslip_controller, "render_pdf", lambda html, base_url: rendered.append(html) or b"%PDF-1.7")

    resp = login_as("Employee", employee_id=1).get("/payroll/payslips/view/1.pdf")

    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert resp.data == b"%PDF-1.7"
    assert 'filename="E-1_De la Cruz_Ana.pdf"' in resp.headers["Content-Disposition"]
    assert "Acme Corp" in rendered[0]


def test_payslip_pdf_non_latin_name_is_encoded(login_as, session, monkeypatch):
    _payslip_routes(session, firstname="Zoë", lastname="Łukasz")
    monkeypatch.setattr(payslip_controller, "render_pdf", lambda html, base_url: b"%PDF-1.7")

    resp = login_as("Admin").get("/payroll/payslips/view/1.pdf")

    assert resp.status_code == 200
    assert "filename*=UTF-8''E-1_%C5%81ukasz_Zo%C3%AB.pdf" in resp.headers["Content-Disposition"]
