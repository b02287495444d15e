from __future__ import annotations

from typing import Protocol, Sequence

from .model import Company, Payslip


class PayslipRepository(Protocol):
    def list_all(self) -> Sequence[Payslip]:
        raise NotImplementedError

    def get_by_id(self, payslip_id: int) -> Payslip:
        """Raises NotFoundError when the payslip does not exist."""

        raise NotImplementedError


class CompanyRepository(Protocol):
    def list_all(self) -> Sequence[Company]:
        raise NotImplementedError
