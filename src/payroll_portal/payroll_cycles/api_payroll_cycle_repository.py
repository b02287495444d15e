from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..api.pagination import Page
from ..core.exceptions import NotFoundError
from .model import PayrollConfig, PayrollCycle
from .repository import PayrollConfigRepository, PayrollCycleRepository


class ApiPayrollCycleRepository(PayrollCycleRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_page(self, page: int = 1, per_page: int = 10) -> Page[PayrollCycle]:
        payload = self._client.get("/payroll-cycle", params={"page": page, "per_page": per_page})
        return Page.from_payload(payload, item=PayrollCycle.from_dict)

    def get_by_id(self, cycle_id: int) -> Optional[PayrollCycle]:
        try:
            return PayrollCycle.from_dict(self._client.get(f"/payroll-cycle/{cycle_id}"))
        except NotFoundError:
            return None

    def create(self, data: dict[str, Any]) -> PayrollCycle:
        return PayrollCycle.from_dict(self._client.post("/payroll-cycle", json=data))

    def update(self, cycle_id: int, data: dict[str, Any]) -> PayrollCycle:
        return PayrollCycle.from_dict(self._client.put(f"/payroll-cycle/{cycle_id}", json=data))

    def delete(self, cycle_id: int) -> None:
        self._client.delete(f"/payroll-cycle/{cycle_id}")


class ApiPayrollConfigRepository(PayrollConfigRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[PayrollConfig]:
        rows = self._client.get("/payroll-config") or []
        return [PayrollConfig.from_dict(r) for r in rows]

    def create(self, data: dict[str, Any]) -> None:
        self._client.post("/payroll-config", json=data)

    def update(self, config_id: int, data: dict[str, Any]) -> None:
        self._client.put(f"/payroll-config/{config_id}", json=data)
