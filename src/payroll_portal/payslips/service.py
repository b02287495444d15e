from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..common.listing import PageSlice, build_table
from ..common.money import format_currency
from ..core.constants import DEFAULT_BILLED_HOURS, DEFAULT_ITEMS_PER_PAGE, HOURLY_EARNING_CATEGORIES
from ..core.enums import PayrollItemType, Role
from ..core.exceptions import AuthorizationError
from ..payroll.model import PayrollItem
from ..payroll.repository import PayrollItemRepository
from .model import Company, Payslip
from .repository import CompanyRepository, PayslipRepository

logger = logging.getLogger(__name__)

SEARCH_FIELDS = (
    "employee.user.lastname",
    "employee.user.firstname",
    "payroll_cycle.start_date",
    "payroll_cycle.end_date",
)
SORT_KEYS = (
    "employee.user.lastname",
    "payroll_cycle.pay_date",
    "gross_salary",
    "net_salary",
    "issued_date",
)
MISSING_EMPLOYEE_ID = "Unable to filter payslips: user employee ID is missing."


@dataclass(frozen=True)
class PayslipListView:
    payslips: list[Payslip]
    error: Optional[str] = None


@dataclass(frozen=True)
class EarningRow:
    desc: str
    hours: str
    rate: str
    current: str
    ytd: str = "N/A"


@dataclass(frozen=True)
class DeductionRow:
    desc: str
    current: str
    ytd: str = "N/A"


@dataclass(frozen=True)
class PayslipDetailView:
    payslip: Payslip
    company: Optional[Company]
    items: list[PayrollItem]
    earnings: list[EarningRow]
    deductions: list[DeductionRow]

    @property
    def pdf_filename(self) -> str:
        emp = self.payslip.employee
        user = emp.user if emp else None
        parts = [
            emp.company_id_number if emp else "",
            user.lastname if user else "",
            user.firstname if user else "",
        ]
        return "_".join(parts) + ".pdf"


def earning_rows(items: list[PayrollItem], currency: str = "PHP") -> list[EarningRow]:
    rows = []
    for item in items:
        if item.type != PayrollItemType.EARNING.value:
            continue
        if item.category in HOURLY_EARNING_CATEGORIES:
            hours = DEFAULT_BILLED_HOURS
            rows.append(
                EarningRow(
                    desc=item.category,
                    hours=str(hours),
                    rate=format_currency(item.amount / Decimal(hours), currency),
                    current=format_currency(item.amount, currency),
                )
            )
        else:
            rows.append(EarningRow(desc=item.category, hours="-", rate="-", current=format_currency(item.amount, currency)))
    return rows


def deduction_rows(items: list[PayrollItem], currency: str = "PHP") -> list[DeductionRow]:
    kinds = (PayrollItemType.DEDUCTION.value, PayrollItemType.CONTRIBUTION.value)
    return [DeductionRow(desc=i.category, current=format_currency(i.amount, currency)) for i in items if i.type in kinds]


class PayslipService:
    def __init__(
        self,
        payslips: PayslipRepository,
        companies: CompanyRepository,
        items: PayrollItemRepository,
        *,
        currency: str = "PHP",
    ):
        self._payslips = payslips
        self._companies = companies
        self._items = items
        self._currency = currency

    def load(self, *, role_name: Optional[str], employee_id: Optional[int]) -> PayslipListView:
        payslips = list(self._payslips.list_all())
        if role_name != Role.EMPLOYEE.value:
            return PayslipListView(payslips=payslips)

        if not employee_id:
            logger.warning("Employee user without employee_id cannot see payslips")
            return PayslipListView(payslips=[], error=MISSING_EMPLOYEE_ID)
        return PayslipListView(payslips=[p for p in payslips if p.employee_id == employee_id])

    def table(
        self,
        payslips: list[Payslip],
        *,
        term: Optional[str] = None,
        sort_key: Optional[str] = None,
        direction: str = "asc",
        page: int = 1,
        per_page: int = DEFAULT_ITEMS_PER_PAGE,
    ) -> PageSlice[Payslip]:
        return build_table(
            payslips,
            term=term,
            search_fields=SEARCH_FIELDS,
            sort_key=sort_key,
            direction=direction,
            allowed_sort_keys=SORT_KEYS,
            page=page,
            per_page=per_page,
        )

    def view(
        self,
        payslip_id: int,
        *,
        role_name: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> PayslipDetailView:
        """Raises NotFoundError for an unknown id, AuthorizationError for someone else's payslip."""
        payslip = self._payslips.get_by_id(payslip_id)
        if role_name == Role.EMPLOYEE.value and payslip.employee_id != employee_id:
            raise AuthorizationError("You can only view your own payslips.")

        companies = self._companies.list_all()
        items: list[PayrollItem] = []
        if payslip.payroll_cycles_id:
            all_items = self._items.list_all(payroll_cycles_id=payslip.payroll_cycles_id)
            items = [i for i in all_items if i.applies_to(payslip.employee_id)]

        return PayslipDetailView(
            payslip=payslip,
            company=companies[0] if companies else None,
            items=items,
            earnings=earning_rows(items, self._currency),
            deductions=deduction_rows(items, self._currency),
        )

    def summary(self, view: PayslipDetailView) -> dict[str, Any]:
        p = view.payslip
        return {
            "basic_salary": format_currency(p.salary.basic_salary if p.salary else 0, self._currency),
            "gross_salary": format_currency(p.gross_salary, self._currency),
            "earnings": format_currency(p.earnings, self._currency),
            "deductions": format_currency(p.deductions, self._currency),
            "net_salary": format_currency(p.net_salary, self._currency),
        }
