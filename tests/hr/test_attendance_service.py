from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from payroll_portal.attendance.model import Attendance
from payroll_portal.attendance.service import AttendanceService, calculate_worked_hours
from payroll_portal.core.exceptions import ValidationError
from payroll_portal.employees.model import Employee


class InMemoryAttendance:
    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self._id = len(self.rows)

    def list_all(self):
        return list(self.rows)

    def create(self, data):
        self._id += 1
        rec = Attendance(id=self._id, **data)
        self.rows.append(rec)
        return rec

    def update(self, attendance_id, data):
        for i, row in enumerate(self.rows):
            if row.id == attendance_id:
                self.rows[i] = replace(row, **data)
                return self.rows[i]
        raise KeyError(attendance_id)


class InMemoryEmployees:
    def list_all(self):
        return [Employee(id=1, company_id_number="EMP-1", user_id=None, department_id=None, designation_id=None)]


NOW = datetime(2025, 3, 10, 8, 30, 0)


def test_worked_hours_rounded():
    assert calculate_worked_hours("08:00:00", "17:20:00") == 9.33
    assert calculate_worked_hours("08:00", "12:00") == 4.0


def test_clock_in_then_out():
    repo = InMemoryAttendance()
    service = AttendanceService(repo, InMemoryEmployees())

    rec = service.clock_in(1, location="Main St, Makati", now=NOW)
    assert rec.date == "2025-03-10"
    assert rec.clock_in == "08:30:00"

    done = service.clock_out(rec.id, location="Main St, Makati", now=datetime(2025, 3, 10, 17, 30, 0))
    assert done.clock_out == "17:30:00"
    assert done.worked_hours == 9.0


def test_second_clock_in_same_day_rejected():
    service = AttendanceService(InMemoryAttendance(), InMemoryEmployees())
    service.clock_in(1, now=NOW)

    with pytest.raises(ValidationError, match="Already clocked in"):
        service.clock_in(1, now=NOW)


def test_clock_in_after_clock_out_rejected():
    done = Attendance(id=1, employee_id=1, date="2025-03-10", clock_in="08:00:00", clock_out="17:00:00")
    service = AttendanceService(InMemoryAttendance([done]), InMemoryEmployees())

    with pytest.raises(ValidationError, match="Already clocked in and out today"):
        service.clock_in(1, now=NOW)


def test_clock_out_unknown_record():
    service = AttendanceService(InMemoryAttendance(), InMemoryEmployees())

    with pytest.raises(ValidationError, match="No clock-in record found"):
        service.clock_out(5, now=NOW)


def test_clock_out_only_touches_own_record():
    repo = InMemoryAttendance([Attendance(id=1, employee_id=2, date="2025-03-10", clock_in="08:00:00")])
    service = AttendanceService(repo, InMemoryEmployees())

    with pytest.raises(ValidationError, match="No clock-in record found"):
        service.clock_out(1, employee_id=1, now=NOW)

    assert repo.rows[0].clock_out is None


def test_today_record_and_period_total():
    rows = [
        Attendance(id=1, employee_id=1, date="2025-03-03", clock_in="08:00:00", clock_out="16:00:00", worked_hours=8.0),
        Attendance(id=2, employee_id=1, date="2025-03-10", clock_in="08:00:00", clock_out="12:30:00", worked_hours=4.5),
        Attendance(id=3, employee_id=2, date="2025-03-10", clock_in="08:00:00", worked_hours=None),
        Attendance(id=4, employee_id=1, date="2025-02-28", clock_in="08:00:00", worked_hours=8.0),
    ]
    service = AttendanceService(InMemoryAttendance(rows), InMemoryEmployees())

    assert service.today_record(1, today=date(2025, 3, 10)).id == 2
    assert service.total_hours_in_period(1, "2025-03-01", "2025-03-31") == 12.5


def test_export_rows_use_employee_names():
    rows = [Attendance(id=1, employee_id=1, date="2025-03-03", clock_in="08:00:00")]

    exported = AttendanceService(InMemoryAttendance(rows), InMemoryEmployees()).export_rows()

    assert exported[0]["Employee"] == "EMP-1"
    assert exported[0]["Clock Out"] == ""
