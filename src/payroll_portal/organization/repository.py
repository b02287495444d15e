from __future__ import annotations

from typing import Any, Optional, Protocol

from ..api.pagination import Page
from .model import Department, Designation, Holiday


class DepartmentRepository(Protocol):
    def list_page(self, page: int = 1, per_page: int = 7) -> Page[Department]:
        raise NotImplementedError

    def get_by_id(self, department_id: int) -> Optional[Department]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> Department:
        raise NotImplementedError

    def update(self, department_id: int, data: dict[str, Any]) -> Department:
        raise NotImplementedError

    def delete(self, department_id: int) -> None:
        raise NotImplementedError


class DesignationRepository(Protocol):
    def list_page(self, page: int = 1, per_page: int = 7) -> Page[Designation]:
        raise NotImplementedError

    def get_by_id(self, designation_id: int) -> Optional[Designation]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> Designation:
        raise NotImplementedError

    def update(self, designation_id: int, data: dict[str, Any]) -> Designation:
        raise NotImplementedError

    def delete(self, designation_id: int) -> None:
        raise NotImplementedError


class HolidayRepository(Protocol):
    def list_page(self, page: int = 1, per_page: int = 10) -> Page[Holiday]:
        raise NotImplementedError

    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> Holiday:
        raise NotImplementedError

    def update(self, holiday_id: int, data: dict[str, Any]) -> Holiday:
        raise NotImplementedError

    def delete(self, holiday_id: int) -> None:
        raise NotImplementedError
