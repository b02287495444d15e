from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..api.pagination import Page
from ..core.exceptions import NotFoundError
from .model import Payroll, PayrollItem
from .repository import PayrollItemRepository, PayrollRepository


class ApiPayrollRepository(PayrollRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_page(self, page: int = 1, per_page: int = 10) -> Page[Payroll]:
        payload = self._client.get("/payroll", params={"page": page, "per_page": per_page})
        if isinstance(payload, list):
            # unpaginated deployments answer with a bare list
            return Page(data=[Payroll.from_dict(r) for r in payload], per_page=len(payload) or per_page, total=len(payload))
        return Page.from_payload(payload, item=Payroll.from_dict)

    def get_by_id(self, payroll_id: int) -> Optional[Payroll]:
        try:
            return Payroll.from_dict(self._client.get(f"/payroll/{payroll_id}"))
        except NotFoundError:
            return None

    def create(self, data: dict[str, Any]) -> Payroll:
        return Payroll.from_dict(self._client.post("/payroll", json=data))

    def update(self, payroll_id: int, data: dict[str, Any]) -> Payroll:
        return Payroll.from_dict(self._client.put(f"/payroll/{payroll_id}", json=data))

    def delete(self, payroll_id: int) -> None:
        self._client.delete(f"/payroll/{payroll_id}")


class ApiPayrollItemRepository(PayrollItemRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(
        self,
        *,
        payroll_id: Optional[int] = None,
        payroll_cycles_id: Optional[int] = None,
        active_config: bool = False,
    ) -> Sequence[PayrollItem]:
        params: dict[str, Any] = {}
        if payroll_id is not None:
            params["payroll_id"] = payroll_id
        if payroll_cycles_id is not None:
            params["payroll_cycles_id"] = payroll_cycles_id
        if active_config:
            params["active_config"] = "true"
        rows = self._client.get("/payroll-items", params=params or None) or []
        return [PayrollItem.from_dict(r) for r in rows]

    def get_by_id(self, item_id: int) -> Optional[PayrollItem]:
        try:
            return PayrollItem.from_dict(self._client.get(f"/payroll-items/{item_id}"))
        except NotFoundError:
            return None

    def create(self, data: dict[str, Any]) -> PayrollItem:
        return PayrollItem.from_dict(self._client.post("/payroll-items", json=data))

    def update(self, item_id: int, data: dict[str, Any]) -> PayrollItem:
        return PayrollItem.from_dict(self._client.put(f"/payroll-items/{item_id}", json=data))

    def delete(self, item_id: int) -> None:
        self._client.delete(f"/payroll-items/{item_id}")
