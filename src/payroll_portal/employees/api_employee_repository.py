from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..core.exceptions import ApiError, NotFoundError
from ..users.model import User
from .model import Employee
from .payload import needs_multipart, normalize_employee_payload, to_multipart
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class ApiEmployeeRepository(EmployeeRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Employee]:
        rows = self._client.get("/employees") or []
        return [Employee.from_dict(r) for r in rows]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        try:
            payload = self._client.get(f"/employees/{employee_id}")
        except NotFoundError:
            return None
        return Employee.from_dict(payload["employee"])

    def _send(self, method: str, endpoint: str, data: dict[str, Any], *, is_update: bool) -> Any:
        normalized = normalize_employee_payload(data, is_update=is_update)
        if needs_multipart(normalized, is_update=is_update):
            fields, files = to_multipart(normalized, is_update=is_update)
            logger.debug("Sending employee as multipart: %s", [k for k, _ in fields])
            return self._client.request(method, endpoint, data=fields, files=files)
        return self._client.request(method, endpoint, json=normalized)

    def create(self, data: dict[str, Any]) -> Employee:
        payload = self._send("POST", "/employees", data, is_update=False)
        if not isinstance(payload, dict) or not payload.get("employee"):
            raise ApiError("Invalid server response: 'employee' object missing", status=200, payload=payload or {})
        return Employee.from_dict(payload["employee"])

    def update(self, employee_id: int, data: dict[str, Any]) -> Employee:
        payload = self._send("PUT", f"/employees/{employee_id}", data, is_update=True)
        body = payload.get("employee", payload) if isinstance(payload, dict) else payload
        return Employee.from_dict(body)

    def delete(self, employee_id: int) -> None:
        self._client.delete(f"/employees/{employee_id}")

    def delete_education_background(self, education_id: int) -> None:
        self._client.delete(f"/education-backgrounds/{education_id}")

    def delete_dependent(self, dependent_id: int) -> None:
        self._client.delete(f"/dependents/{dependent_id}")

    def delete_document(self, document_id: int) -> None:
        self._client.delete(f"/documents/{document_id}")

    def list_users_without_employee(self) -> Sequence[User]:
        rows = self._client.get("/users-doesnt-have-employee") or []
        return [User.from_dict(r) for r in rows]

    def list_without_salary(self) -> Sequence[Employee]:
        rows = self._client.get("/employees-doesnt-have-salary") or []
        return [Employee.from_dict(r) for r in rows]

    def list_without_shift(self) -> Sequence[Employee]:
        payload = self._client.get("/employees-doesnt-have-shift") or {}
        rows = payload.get("employees") or []
        if not isinstance(rows, list):
            raise ApiError("Invalid API response: 'employees' is not an array", status=200, payload=payload)
        return [Employee.from_dict(r) for r in rows]
