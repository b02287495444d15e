from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..users.model import User
from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: int, data: dict[str, Any]) -> Employee:
        raise NotImplementedError

    def delete(self, employee_id: int) -> None:
        raise NotImplementedError

    def delete_education_background(self, education_id: int) -> None:
        raise NotImplementedError

    def delete_dependent(self, dependent_id: int) -> None:
        raise NotImplementedError

    def delete_document(self, document_id: int) -> None:
        raise NotImplementedError

    def list_users_without_employee(self) -> Sequence[User]:
        raise NotImplementedError

    def list_without_salary(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_without_shift(self) -> Sequence[Employee]:
        raise NotImplementedError
