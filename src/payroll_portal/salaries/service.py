from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.enums import PayPeriod
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import Salary
from .repository import SalaryRepository


@dataclass(frozen=True)
class SalaryView:
    salaries: list[Salary]
    employees: list[Employee]
    available_employees: list[Employee]


class SalaryService:
    def __init__(self, salaries: SalaryRepository, employees: EmployeeRepository):
        self._salaries = salaries
        self._employees = employees

    def load(self) -> SalaryView:
        employees = list(self._employees.list_all())
        by_id = {e.id: e for e in employees}
        salaries = [replace(s, employee=by_id.get(s.employee_id) or s.employee) for s in self._salaries.list_all()]

        available = list(self._employees.list_without_salary())
        return SalaryView(salaries=salaries, employees=employees, available_employees=available)

    @staticmethod
    def _clean(data: dict[str, Any]) -> dict[str, Any]:
        if not data.get("employee_id"):
            raise ValidationError("Please select an employee")
        try:
            amount = Decimal(str(data.get("basic_salary") or "").strip())
        except InvalidOperation:
            raise ValidationError("Basic salary must be a number")
        if amount < 0:
            raise ValidationError("Basic salary cannot be negative")

        period = data.get("pay_period") or PayPeriod.MONTHLY.value
        try:
            period = PayPeriod(period).value
        except ValueError:
            raise ValidationError("Invalid pay period")

        return {
            "employee_id": int(data["employee_id"]),
            "basic_salary": str(amount),
            "pay_period": period,
            "start_date": data.get("start_date") or None,
            "end_date": data.get("end_date") or None,
        }

    def add_salary(self, data: dict[str, Any]) -> Salary:
        return self._salaries.create(self._clean(data))

    def edit_salary(self, salary_id: int, data: dict[str, Any]) -> Salary:
        return self._salaries.update(salary_id, self._clean(data))

    def remove_salary(self, salary_id: int) -> None:
        self._salaries.delete(salary_id)
