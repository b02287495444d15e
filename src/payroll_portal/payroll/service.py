from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Sequence

from ..api.pagination import collect_all_pages
from ..core.constants import PAYROLL_PER_PAGE
from ..core.enums import PayrollItemScope, PayrollItemType, PayrollStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll_cycles.model import PayrollCycle
from ..payroll_cycles.repository import PayrollCycleRepository
from ..salaries.model import Salary
from ..salaries.repository import SalaryRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Payroll, PayrollItem
from .repository import PayrollItemRepository, PayrollRepository


@dataclass(frozen=True)
class PayrollView:
    payrolls: list[Payroll]
    employees: list[Employee]
    salaries: list[Salary]
    payroll_items: list[PayrollItem]
    current_page: int = 1
    last_page: int = 1
    per_page: int = PAYROLL_PER_PAGE
    total: int = 0


@dataclass(frozen=True)
class PayrollItemView:
    payroll_items: list[PayrollItem]
    employees: list[Employee]
    payroll_cycles: list[PayrollCycle]


class PayrollService:
    def __init__(
        self,
        payrolls: PayrollRepository,
        items: PayrollItemRepository,
        salaries: SalaryRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payrolls = payrolls
        self._items = items
        self._salaries = salaries
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()

    def enrich(
        self,
        payroll: Payroll,
        *,
        salaries: Sequence[Salary],
        employees: Sequence[Employee],
        items: Iterable[PayrollItem],
    ) -> Payroll:
        salary = next((s for s in salaries if s.employee_id == payroll.employee_id), None)
        basic = salary.basic_salary if salary else Decimal("0")
        totals = self._calculator.totals(basic, [i for i in items if i.payroll_id == payroll.id])
        return replace(
            payroll,
            total_earnings=totals.total_earnings,
            total_deductions=totals.total_deductions,
            net_salary=totals.net_salary,
            employee=next((e for e in employees if e.id == payroll.employee_id), None),
            salary=salary,
        )

    def load(self, page: int = 1, per_page: int = PAYROLL_PER_PAGE) -> PayrollView:
        result = self._payrolls.list_page(page, per_page)
        employees = list(self._employees.list_all())
        salaries = list(self._salaries.list_all())
        items = list(self._items.list_all())

        payrolls = [self.enrich(p, salaries=salaries, employees=employees, items=items) for p in result.data]
        return PayrollView(
            payrolls=payrolls,
            employees=employees,
            salaries=salaries,
            payroll_items=items,
            current_page=result.current_page,
            last_page=result.last_page,
            per_page=result.per_page,
            total=result.total,
        )

    def items_for_payroll(self, payroll_id: int) -> list[PayrollItem]:
        return list(self._items.list_all(payroll_id=payroll_id))

    @staticmethod
    def _clean(data: dict[str, Any]) -> dict[str, Any]:
        if not data.get("employee_id"):
            raise ValidationError("Please select an employee")
        status = data.get("status") or PayrollStatus.PENDING.value
        try:
            status = PayrollStatus(status).value
        except ValueError:
            raise ValidationError("Invalid payroll status")
        return {
            "employee_id": int(data["employee_id"]),
            "salary_id": data.get("salary_id") or None,
            "pay_date": data.get("pay_date") or None,
            "status": status,
        }

    def add_payroll(self, data: dict[str, Any]) -> Payroll:
        created = self._payrolls.create(self._clean(data))
        # a fresh payroll has no items yet
        return self.enrich(
            created,
            salaries=list(self._salaries.list_all()),
            employees=list(self._employees.list_all()),
            items=[],
        )

    def edit_payroll(self, payroll_id: int, data: dict[str, Any]) -> Payroll:
        updated = self._payrolls.update(payroll_id, self._clean(data))
        return self.enrich(
            updated,
            salaries=list(self._salaries.list_all()),
            employees=list(self._employees.list_all()),
            items=self.items_for_payroll(payroll_id),
        )

    def remove_payroll(self, payroll_id: int) -> None:
        self._payrolls.delete(payroll_id)


def payroll_item_payload(data: dict[str, Any]) -> dict[str, Any]:
    """Shape a form submission into the body the payroll-items endpoint expects."""
    scope = data.get("scope") or PayrollItemScope.SPECIFIC.value
    try:
        scope = PayrollItemScope(scope).value
    except ValueError:
        raise ValidationError("Invalid scope")

    item_type = data.get("type") or ""
    try:
        item_type = PayrollItemType(item_type).value
    except ValueError:
        raise ValidationError("Invalid payroll item type")

    try:
        amount = Decimal(str(data.get("amount") or "").strip())
    except InvalidOperation:
        raise ValidationError("Amount must be a number")

    employee_id = None
    if scope != PayrollItemScope.GLOBAL.value:
        if not data.get("employee_id"):
            raise ValidationError("Please select an employee for a specific item")
        employee_id = int(data["employee_id"])

    return {
        "employee_id": employee_id,
        "payroll_cycles_id": int(data["payroll_cycles_id"]) if data.get("payroll_cycles_id") else None,
        "scope": scope,
        "type": item_type,
        "category": (data.get("category") or "").strip(),
        "amount": str(amount),
    }


class PayrollItemService:
    def __init__(self, items: PayrollItemRepository, employees: EmployeeRepository, cycles: PayrollCycleRepository):
        self._items = items
        self._employees = employees
        self._cycles = cycles

    def load(self) -> PayrollItemView:
        employees = list(self._employees.list_all())
        by_id = {e.id: e for e in employees}
        items = [replace(i, employee=by_id.get(i.employee_id)) for i in self._items.list_all()]
        cycles = collect_all_pages(self._cycles.list_page, PAYROLL_PER_PAGE)
        return PayrollItemView(payroll_items=items, employees=employees, payroll_cycles=cycles)

    def add_payroll_item(self, data: dict[str, Any]) -> PayrollItem:
        return self._items.create(payroll_item_payload(data))

    def edit_payroll_item(self, item_id: int, data: dict[str, Any]) -> PayrollItem:
        return self._items.update(item_id, payroll_item_payload(data))

    def remove_payroll_item(self, item_id: int) -> None:
        self._items.delete(item_id)
