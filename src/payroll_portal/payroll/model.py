from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..common.money import to_decimal
from ..common.validators import optional_int
from ..core.enums import PayrollItemScope, PayrollStatus
from ..employees.model import Employee
from ..salaries.model import Salary


@dataclass(frozen=True)
class Payroll:
    """Domain entity: a payroll run for one employee.

    Totals are recomputed client-side from the salary and payroll items.
    """

    id: int
    employee_id: int
    salary_id: Optional[int]
    pay_date: Optional[str]
    status: str = PayrollStatus.PENDING.value
    total_earnings: Decimal = Decimal("0")
    total_deductions: Decimal = Decimal("0")
    net_salary: Decimal = Decimal("0")
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    employee: Optional[Employee] = None
    salary: Optional[Salary] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Payroll":
        return cls(
            id=int(d["id"]),
            employee_id=int(d["employee_id"]),
            salary_id=optional_int(d.get("salary_id")),
            pay_date=d.get("pay_date"),
            status=d.get("status") or PayrollStatus.PENDING.value,
            total_earnings=to_decimal(d.get("total_earnings")),
            total_deductions=to_decimal(d.get("total_deductions")),
            net_salary=to_decimal(d.get("net_salary")),
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )


@dataclass(frozen=True)
class PayrollItem:
    """A single earning/deduction/contribution line."""

    id: int
    type: str
    category: str
    amount: Decimal
    scope: str = PayrollItemScope.SPECIFIC.value
    employee_id: Optional[int] = None
    payroll_id: Optional[int] = None
    payroll_cycles_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    employee: Optional[Employee] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "PayrollItem":
        employee_id = optional_int(d.get("employee_id"))
        scope = d.get("scope") or (PayrollItemScope.SPECIFIC.value if employee_id else PayrollItemScope.GLOBAL.value)
        return cls(
            id=int(d["id"]),
            type=d.get("type") or "",
            category=d.get("category") or "",
            amount=to_decimal(d.get("amount")),
            scope=scope,
            employee_id=employee_id,
            payroll_id=optional_int(d.get("payroll_id")),
            payroll_cycles_id=optional_int(d.get("payroll_cycles_id")),
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )

    def applies_to(self, employee_id: Optional[int]) -> bool:
        if self.scope == PayrollItemScope.GLOBAL.value:
            return True
        return self.scope == PayrollItemScope.SPECIFIC.value and self.employee_id == employee_id
