from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..model import PayrollItem


@dataclass(frozen=True)
class PayrollTotals:
    total_earnings: Decimal
    total_deductions: Decimal
    net_salary: Decimal


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def totals(self, basic_salary: Decimal, items: Iterable[PayrollItem]) -> PayrollTotals:
        raise NotImplementedError
