from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..core.exceptions import NotFoundError
from .model import Salary
from .repository import SalaryRepository


class ApiSalaryRepository(SalaryRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Salary]:
        rows = self._client.get("/salary") or []
        return [Salary.from_dict(r) for r in rows]

    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        try:
            return Salary.from_dict(self._client.get(f"/salary/{salary_id}"))
        except NotFoundError:
            return None

    def create(self, data: dict[str, Any]) -> Salary:
        return Salary.from_dict(self._client.post("/salary", json=data))

    def update(self, salary_id: int, data: dict[str, Any]) -> Salary:
        return Salary.from_dict(self._client.put(f"/salary/{salary_id}", json=data))

    def delete(self, salary_id: int) -> None:
        self._client.delete(f"/salary/{salary_id}")
