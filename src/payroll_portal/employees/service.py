from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from ..api.pagination import collect_all_pages
from ..core.constants import DEPARTMENTS_PER_PAGE, DESIGNATIONS_PER_PAGE
from ..core.enums import EmployeeStatus
from ..core.exceptions import ValidationError
from ..organization.model import Department, Designation
from ..organization.repository import DepartmentRepository, DesignationRepository
from ..users.model import User
from .model import Employee
from .repository import EmployeeRepository


@dataclass(frozen=True)
class EmployeeView:
    employees: list[Employee]
    users_without_employee: list[User]
    departments: list[Department]
    designations: list[Designation]


class EmployeeService:
    def __init__(
        self,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        designations: DesignationRepository,
    ):
        self._employees = employees
        self._departments = departments
        self._designations = designations

    def load(self) -> EmployeeView:
        employees = self._employees.list_all()
        users = list(self._employees.list_users_without_employee())
        departments = collect_all_pages(self._departments.list_page, DEPARTMENTS_PER_PAGE)
        designations = collect_all_pages(self._designations.list_page, DESIGNATIONS_PER_PAGE)

        dept_by_id = {d.id: d for d in departments}
        desig_by_id = {d.id: d for d in designations}
        enriched = [
            replace(
                e,
                department=dept_by_id.get(e.department_id) or e.department,
                designation=desig_by_id.get(e.designation_id) or e.designation,
            )
            for e in employees
        ]
        return EmployeeView(
            employees=enriched,
            users_without_employee=users,
            departments=departments,
            designations=designations,
        )

    def get(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    @staticmethod
    def _check(data: dict[str, Any]) -> dict[str, Any]:
        status = data.get("status") or EmployeeStatus.ACTIVE.value
        try:
            data["status"] = EmployeeStatus(status).value
        except ValueError:
            raise ValidationError("Invalid employee status")
        return data

    def add_employee(self, data: dict[str, Any]) -> Employee:
        if not data.get("user_id"):
            raise ValidationError("Please select a user for this employee")
        return self._employees.create(self._check(dict(data)))

    def edit_employee(self, employee_id: int, data: dict[str, Any]) -> Employee:
        return self._employees.update(employee_id, self._check(dict(data)))

    def remove_employee(self, employee_id: int) -> None:
        self._employees.delete(employee_id)

    def remove_education_background(self, education_id: int) -> None:
        self._employees.delete_education_background(education_id)

    def remove_dependent(self, dependent_id: int) -> None:
        self._employees.delete_dependent(dependent_id)

    def remove_document(self, document_id: int) -> None:
        self._employees.delete_document(document_id)
