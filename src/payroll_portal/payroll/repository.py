from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..api.pagination import Page
from .model import Payroll, PayrollItem


class PayrollRepository(Protocol):
    def list_page(self, page: int = 1, per_page: int = 10) -> Page[Payroll]:
        raise NotImplementedError

    def get_by_id(self, payroll_id: int) -> Optional[Payroll]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> Payroll:
        raise NotImplementedError

    def update(self, payroll_id: int, data: dict[str, Any]) -> Payroll:
        raise NotImplementedError

    def delete(self, payroll_id: int) -> None:
        raise NotImplementedError


class PayrollItemRepository(Protocol):
    def list_all(
        self,
        *,
        payroll_id: Optional[int] = None,
        payroll_cycles_id: Optional[int] = None,
        active_config: bool = False,
    ) -> Sequence[PayrollItem]:
        raise NotImplementedError

    def get_by_id(self, item_id: int) -> Optional[PayrollItem]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> PayrollItem:
        raise NotImplementedError

    def update(self, item_id: int, data: dict[str, Any]) -> PayrollItem:
        raise NotImplementedError

    def delete(self, item_id: int) -> None:
        raise NotImplementedError
