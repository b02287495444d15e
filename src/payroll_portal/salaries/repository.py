from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Salary


class SalaryRepository(Protocol):
    def list_all(self) -> Sequence[Salary]:
        raise NotImplementedError

    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> Salary:
        raise NotImplementedError

    def update(self, salary_id: int, data: dict[str, Any]) -> Salary:
        raise NotImplementedError

    def delete(self, salary_id: int) -> None:
        raise NotImplementedError
