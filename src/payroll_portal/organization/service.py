from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from ..api.pagination import collect_all_pages
from ..common.validators import require_non_empty
from ..core.constants import DEPARTMENTS_PER_PAGE, DESIGNATIONS_PER_PAGE, HOLIDAYS_PER_PAGE
from .model import Department, Designation, Holiday
from .repository import DepartmentRepository, DesignationRepository, HolidayRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DepartmentView:
    departments: list[Department]


@dataclass(frozen=True)
class DesignationView:
    designations: list[Designation]
    departments: list[Department]


@dataclass(frozen=True)
class HolidayView:
    holidays: list[Holiday]


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_all(self) -> list[Department]:
        rows = collect_all_pages(self._departments.list_page, DEPARTMENTS_PER_PAGE)
        return [d for d in rows if not d.deleted_at]

    def load(self) -> DepartmentView:
        return DepartmentView(departments=self.list_all())

    def add_department(self, data: dict[str, Any]) -> Department:
        name = require_non_empty(data.get("department"), "Department")
        return self._departments.create({"department": name})

    def edit_department(self, department_id: int, data: dict[str, Any]) -> Department:
        name = require_non_empty(data.get("department"), "Department")
        return self._departments.update(department_id, {"department": name})

    def remove_department(self, department_id: int) -> None:
        self._departments.delete(department_id)


class DesignationService:
    def __init__(self, designations: DesignationRepository, departments: DepartmentRepository):
        self._designations = designations
        self._departments = departments

    def load(self) -> DesignationView:
        designations = collect_all_pages(self._designations.list_page, DESIGNATIONS_PER_PAGE)
        # only the first page of departments is used for the join
        departments = list(self._departments.list_page(1, DEPARTMENTS_PER_PAGE).data)
        by_id = {d.id: d for d in departments}

        enriched = [
            replace(d, department=by_id.get(d.department_id) or d.department) for d in designations
        ]
        logger.debug("Loaded %d designations across %d departments", len(enriched), len(by_id))
        return DesignationView(designations=enriched, departments=departments)

    @staticmethod
    def _clean(data: dict[str, Any]) -> dict[str, Any]:
        return {
            "designation": require_non_empty(data.get("designation"), "Designation"),
            "department_id": data.get("department_id") or None,
        }

    def add_designation(self, data: dict[str, Any]) -> Designation:
        return self._designations.create(self._clean(data))

    def edit_designation(self, designation_id: int, data: dict[str, Any]) -> Designation:
        return self._designations.update(designation_id, self._clean(data))

    def remove_designation(self, designation_id: int) -> None:
        self._designations.delete(designation_id)


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def load(self) -> HolidayView:
        page = self._holidays.list_page(1, HOLIDAYS_PER_PAGE)
        return HolidayView(holidays=[h for h in page.data if not h.deleted_at])

    @staticmethod
    def _clean(data: dict[str, Any]) -> dict[str, Any]:
        return {
            "name_holiday": require_non_empty(data.get("name_holiday"), "Holiday name"),
            "date_holiday": require_non_empty(data.get("date_holiday"), "Holiday date"),
            "type_holiday": require_non_empty(data.get("type_holiday"), "Holiday type"),
        }

    def add_holiday(self, data: dict[str, Any]) -> Holiday:
        return self._holidays.create(self._clean(data))

    def edit_holiday(self, holiday_id: int, data: dict[str, Any]) -> Holiday:
        return self._holidays.update(holiday_id, self._clean(data))

    def remove_holiday(self, holiday_id: int) -> None:
        self._holidays.delete(holiday_id)
