from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..api.pagination import Page
from .model import PayrollConfig, PayrollCycle


class PayrollCycleRepository(Protocol):
    def list_page(self, page: int = 1, per_page: int = 10) -> Page[PayrollCycle]:
        raise NotImplementedError

    def get_by_id(self, cycle_id: int) -> Optional[PayrollCycle]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> PayrollCycle:
        raise NotImplementedError

    def update(self, cycle_id: int, data: dict[str, Any]) -> PayrollCycle:
        raise NotImplementedError

    def delete(self, cycle_id: int) -> None:
        raise NotImplementedError


class PayrollConfigRepository(Protocol):
    def list_all(self) -> Sequence[PayrollConfig]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> None:
        raise NotImplementedError

    def update(self, config_id: int, data: dict[str, Any]) -> None:
        raise NotImplementedError
