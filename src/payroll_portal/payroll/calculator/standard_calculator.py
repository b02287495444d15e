from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ...core.enums import PayrollItemType
from ..model import PayrollItem
from .base import PayrollCalculator, PayrollTotals


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: basic + earnings, minus deductions.

    Contributions are not subtracted here; they only show up on the payslip.
    """

    def totals(self, basic_salary: Decimal, items: Iterable[PayrollItem]) -> PayrollTotals:
        earnings = Decimal(basic_salary or 0)
        deductions = Decimal("0")
        for item in items:
            if item.type == PayrollItemType.EARNING.value:
                earnings += item.amount
            elif item.type == PayrollItemType.DEDUCTION.value:
                deductions += item.amount
        return PayrollTotals(total_earnings=earnings, total_deductions=deductions, net_salary=earnings - deductions)
