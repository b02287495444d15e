from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import format_clock, now_local, parse_clock
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import Attendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceView:
    attendances: list[Attendance]
    employees: list[Employee]


def calculate_worked_hours(clock_in: str, clock_out: str) -> float:
    """Hours between two same-day clock strings, rounded to 2 decimals."""
    t_in = parse_clock(clock_in)
    t_out = parse_clock(clock_out)
    seconds = (t_out.hour * 3600 + t_out.minute * 60 + t_out.second) - (
        t_in.hour * 3600 + t_in.minute * 60 + t_in.second
    )
    return round(seconds / 3600, 2)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def load(self) -> AttendanceView:
        employees = list(self._employees.list_all())
        by_id = {e.id: e for e in employees}
        rows = [replace(a, employee=by_id.get(a.employee_id)) for a in self._attendance.list_all()]
        return AttendanceView(attendances=rows, employees=employees)

    def today_record(self, employee_id: int, *, today: Optional[date] = None) -> Optional[Attendance]:
        day = (today or now_local().date()).isoformat()
        for a in self._attendance.list_all():
            if a.employee_id == employee_id and a.date == day:
                return a
        return None

    def clock_in(self, employee_id: int, *, location: Optional[str] = None, now: Optional[datetime] = None) -> Attendance:
        now = now or now_local()
        existing = self.today_record(employee_id, today=now.date())
        if existing:
            if existing.clock_out:
                raise ValidationError("Already clocked in and out today")
            raise ValidationError("Already clocked in")

        logger.info("Employee %s clocking in at %s", employee_id, format_clock(now))
        return self._attendance.create(
            {
                "employee_id": employee_id,
                "date": now.date().isoformat(),
                "clock_in": format_clock(now),
                "clock_in_location": location,
            }
        )

    def clock_out(
        self,
        attendance_id: int,
        *,
        employee_id: Optional[int] = None,
        location: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Attendance:
        """Close an open record. With `employee_id` set, only that employee's record qualifies."""
        now = now or now_local()
        record = next((a for a in self._attendance.list_all() if a.id == attendance_id), None)
        if record and employee_id is not None and record.employee_id != employee_id:
            logger.warning("Employee %s tried to clock out attendance %s", employee_id, attendance_id)
            record = None
        if not record or not record.clock_in:
            raise ValidationError("No clock-in record found")
        if record.clock_out:
            raise ValidationError("Already clocked out")

        clock_out = format_clock(now)
        logger.info("Attendance %s clocking out at %s", attendance_id, clock_out)
        return self._attendance.update(
            attendance_id,
            {
                "clock_out": clock_out,
                "clock_out_location": location,
                "worked_hours": calculate_worked_hours(record.clock_in, clock_out),
            },
        )

    def total_hours_in_period(self, employee_id: int, start: str, end: str) -> float:
        total = 0.0
        for a in self._attendance.list_all():
            if a.employee_id != employee_id or a.worked_hours is None:
                continue
            if start <= a.date <= end:
                total += a.worked_hours
        return total

    def add_attendance(self, data: dict[str, Any]) -> Attendance:
        if not data.get("employee_id") or not data.get("date") or not data.get("clock_in"):
            raise ValidationError("Employee, date and clock-in time are required")
        return self._attendance.create(data)

    def edit_attendance(self, attendance_id: int, data: dict[str, Any]) -> Attendance:
        body = dict(data)
        if body.get("clock_in") and body.get("clock_out"):
            body["worked_hours"] = calculate_worked_hours(body["clock_in"], body["clock_out"])
        return self._attendance.update(attendance_id, body)

    def export_rows(self) -> list[dict[str, Any]]:
        rows = []
        for a in self.load().attendances:
            rows.append(
                {
                    "Employee": a.employee.display_name if a.employee else f"#{a.employee_id}",
                    "Date": a.date,
                    "Clock In": a.clock_in,
                    "Clock In Location": a.clock_in_location or "",
                    "Clock Out": a.clock_out or "",
                    "Clock Out Location": a.clock_out_location or "",
                    "Worked Hours": a.worked_hours if a.worked_hours is not None else "",
                }
            )
        return rows
