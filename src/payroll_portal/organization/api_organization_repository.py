from __future__ import annotations

from typing import Any, Optional

from ..api.client import ApiClient
from ..api.pagination import Page
from ..core.exceptions import NotFoundError
from .model import Department, Designation, Holiday
from .repository import DepartmentRepository, DesignationRepository, HolidayRepository


class ApiDepartmentRepository(DepartmentRepository):
    """Departments come wrapped: {"departments": {...page...}} / {"department": {...}}."""

    def __init__(self, client: ApiClient):
        self._client = client

    def list_page(self, page: int = 1, per_page: int = 7) -> Page[Department]:
        payload = self._client.get("/departments", params={"page": page, "per_page": per_page})
        return Page.from_payload(payload, key="departments", item=Department.from_dict)

    def get_by_id(self, department_id: int) -> Optional[Department]:
        try:
            payload = self._client.get(f"/departments/{department_id}")
        except NotFoundError:
            return None
        return Department.from_dict(payload["department"])

    def create(self, data: dict[str, Any]) -> Department:
        return Department.from_dict(self._client.post("/departments", json=data)["department"])

    def update(self, department_id: int, data: dict[str, Any]) -> Department:
        return Department.from_dict(self._client.put(f"/departments/{department_id}", json=data)["department"])

    def delete(self, department_id: int) -> None:
        self._client.delete(f"/departments/{department_id}")


class ApiDesignationRepository(DesignationRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_page(self, page: int = 1, per_page: int = 7) -> Page[Designation]:
        payload = self._client.get("/designations", params={"page": page, "per_page": per_page})
        return Page.from_payload(payload, key="designations", item=Designation.from_dict)

    def get_by_id(self, designation_id: int) -> Optional[Designation]:
        try:
            payload = self._client.get(f"/designations/{designation_id}")
        except NotFoundError:
            return None
        return Designation.from_dict(payload["designation"])

    def create(self, data: dict[str, Any]) -> Designation:
        return Designation.from_dict(self._client.post("/designations", json=data)["designation"])

    def update(self, designation_id: int, data: dict[str, Any]) -> Designation:
        return Designation.from_dict(self._client.put(f"/designations/{designation_id}", json=data)["designation"])

    def delete(self, designation_id: int) -> None:
        self._client.delete(f"/designations/{designation_id}")


class ApiHolidayRepository(HolidayRepository):
    """Holiday pages are not wrapped; single records are."""

    def __init__(self, client: ApiClient):
        self._client = client

    def list_page(self, page: int = 1, per_page: int = 10) -> Page[Holiday]:
        payload = self._client.get("/holidays", params={"page": page, "per_page": per_page})
        return Page.from_payload(payload, item=Holiday.from_dict)

    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        try:
            payload = self._client.get(f"/holidays/{holiday_id}")
        except NotFoundError:
            return None
        return Holiday.from_dict(payload["holiday"])

    def create(self, data: dict[str, Any]) -> Holiday:
        return Holiday.from_dict(self._client.post("/holidays", json=data)["holiday"])

    def update(self, holiday_id: int, data: dict[str, Any]) -> Holiday:
        return Holiday.from_dict(self._client.put(f"/holidays/{holiday_id}", json=data)["holiday"])

    def delete(self, holiday_id: int) -> None:
        self._client.delete(f"/holidays/{holiday_id}")
