from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import Shift
from .repository import ShiftRepository

WEEK_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class ShiftView:
    shifts: list[Shift]
    employees: list[Employee]
    available_employees: list[Employee]


class ShiftService:
    def __init__(self, shifts: ShiftRepository, employees: EmployeeRepository):
        self._shifts = shifts
        self._employees = employees

    def load(self) -> ShiftView:
        employees = list(self._employees.list_all())
        by_id = {e.id: e for e in employees}
        shifts = [
            replace(s, employees=[by_id[i] for i in s.employee_ids if i in by_id])
            for s in self._shifts.list_all()
        ]
        return ShiftView(
            shifts=shifts,
            employees=employees,
            available_employees=list(self._employees.list_without_shift()),
        )

    @staticmethod
    def _clean(data: dict[str, Any]) -> dict[str, Any]:
        employee_ids = [int(x) for x in data.get("employee_ids") or []]
        if not employee_ids:
            raise ValidationError("Select at least one employee")
        if not data.get("start_date") or not data.get("end_date"):
            raise ValidationError("Start and end dates are required")
        if data["start_date"] > data["end_date"]:
            raise ValidationError("Start date must be on or before end date")

        return {
            "employee_ids": employee_ids,
            "start_date": data["start_date"],
            "end_date": data["end_date"],
            "description": data.get("description") or "",
            "schedule_settings": [s.to_payload() if hasattr(s, "to_payload") else s for s in data.get("schedule_settings") or []],
            "isGroupSchedule": len(employee_ids) > 1,
        }

    def add_shift(self, data: dict[str, Any]) -> Shift:
        return self._shifts.create(self._clean(data))

    def edit_shift(self, shift_id: int, data: dict[str, Any]) -> Shift:
        return self._shifts.update(shift_id, self._clean(data))

    def remove_shift(self, shift_id: int) -> None:
        self._shifts.delete(shift_id)
