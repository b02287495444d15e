from __future__ import annotations

from decimal import Decimal
from typing import Optional

import pytest

from payroll_portal.api.pagination import Page
from payroll_portal.core.exceptions import ValidationError
from payroll_portal.employees.model import Employee
from payroll_portal.payroll.calculator.standard_calculator import StandardPayrollCalculator
from payroll_portal.payroll.model import Payroll, PayrollItem
from payroll_portal.payroll.service import PayrollService, payroll_item_payload
from payroll_portal.salaries.model import Salary


def _item(id_, type_, amount, payroll_id=None, scope="specific", employee_id=1):
    return PayrollItem(
        id=id_, type=type_, category=type_.title(), amount=Decimal(amount), scope=scope,
        employee_id=employee_id, payroll_id=payroll_id,
    )


class InMemoryPayrolls:
    def __init__(self, rows):
        self.rows = rows
        self.created = []

    def list_page(self, page=1, per_page=10):
        return Page(data=self.rows, current_page=page, last_page=2, per_page=per_page, total=len(self.rows) + per_page)

    def create(self, data):
        self.created.append(data)
        return Payroll(id=99, employee_id=data["employee_id"], salary_id=None, pay_date=data["pay_date"], status=data["status"])


class InMemoryItems:
    def __init__(self, items):
        self.items = items

    def list_all(self, *, payroll_id: Optional[int] = None, payroll_cycles_id=None, active_config=False):
        return [i for i in self.items if payroll_id is None or i.payroll_id == payroll_id]


class InMemorySalaries:
    def __init__(self, rows):
        self.rows = rows

    def list_all(self):
        return self.rows


class InMemoryEmployees:
    def __init__(self, rows):
        self.rows = rows

    def list_all(self):
        return self.rows


EMPLOYEE = Employee(id=1, company_id_number="C-1", user_id=None, department_id=None, designation_id=None)
SALARY = Salary(id=5, employee_id=1, basic_salary=Decimal("20000"))


def _service(payrolls=None, items=None, salaries=None):
    return PayrollService(
        InMemoryPayrolls(payrolls or []),
        InMemoryItems(items or []),
        InMemorySalaries([SALARY] if salaries is None else salaries),
        InMemoryEmployees([EMPLOYEE]),
    )


def test_calculator_ignores_contributions():
    totals = StandardPayrollCalculator().totals(
        Decimal("1000"),
        [_item(1, "earning", "200"), _item(2, "deduction", "50"), _item(3, "contribution", "30")],
    )

    assert totals.total_earnings == Decimal("1200")
    assert totals.total_deductions == Decimal("50")
    assert totals.net_salary == Decimal("1150")


def test_enrich_uses_only_items_of_that_payroll():
    payroll = Payroll(id=10, employee_id=1, salary_id=5, pay_date="2025-03-18")
    items = [_item(1, "earning", "1500", payroll_id=10), _item(2, "deduction", "500", payroll_id=10), _item(3, "earning", "9999", payroll_id=11)]

    enriched = _service().enrich(payroll, salaries=[SALARY], employees=[EMPLOYEE], items=items)

    assert enriched.total_earnings == Decimal("21500")
    assert enriched.total_deductions == Decimal("500")
    assert enriched.net_salary == Decimal("21000")
    assert enriched.employee == EMPLOYEE
    assert enriched.salary == SALARY


def test_enrich_without_salary_starts_from_zero():
    payroll = Payroll(id=10, employee_id=1, salary_id=None, pay_date=None)

    enriched = _service(salaries=[]).enrich(payroll, salaries=[], employees=[], items=[_item(1, "earning", "100", payroll_id=10)])

    assert enriched.net_salary == Decimal("100")
    assert enriched.employee is None


def test_load_keeps_pagination_metadata():
    payroll = Payroll(id=10, employee_id=1, salary_id=5, pay_date=None)

    view = _service(payrolls=[payroll]).load(page=1, per_page=10)

    assert view.last_page == 2
    assert view.payrolls[0].net_salary == Decimal("20000")


def test_add_payroll_enriches_with_no_items():
    service = _service(items=[_item(1, "earning", "500", payroll_id=99)])

    created = service.add_payroll({"employee_id": "1", "pay_date": "2025-03-18", "status": "pending"})

    assert created.net_salary == Decimal("20000")
    assert service._payrolls.created[0]["employee_id"] == 1


def test_add_payroll_requires_employee():
    with pytest.raises(ValidationError):
        _service().add_payroll({"employee_id": "", "status": "pending"})


def test_global_item_payload_drops_employee():
    body = payroll_item_payload({"scope": "global", "employee_id": "4", "type": "deduction", "category": "SSS", "amount": "300"})

    assert body["employee_id"] is None
    assert body["amount"] == "300"


def test_specific_item_needs_employee():
    with pytest.raises(ValidationError):
        payroll_item_payload({"scope": "specific", "type": "earning", "category": "Bonus", "amount": "10"})


@pytest.mark.parametrize(
    "data",
    [
        {"scope": "everyone", "type": "earning", "amount": "1", "employee_id": "1"},
        {"scope": "specific", "type": "bonus", "amount": "1", "employee_id": "1"},
        {"scope": "specific", "type": "earning", "amount": "abc", "employee_id": "1"},
    ],
)
def test_invalid_item_payloads(data):
    with pytest.raises(ValidationError):
        payroll_item_payload(data)
