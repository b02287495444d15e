from __future__ import annotations

from typing import Any, Sequence

from ..api.client import ApiClient
from .model import Attendance
from .repository import AttendanceRepository


class ApiAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Attendance]:
        rows = self._client.get("/attendances")
        if not isinstance(rows, list):
            return []
        return [Attendance.from_dict(r) for r in rows]

    def create(self, data: dict[str, Any]) -> Attendance:
        return Attendance.from_dict(self._client.post("/attendances", json=data))

    def update(self, attendance_id: int, data: dict[str, Any]) -> Attendance:
        return Attendance.from_dict(self._client.put(f"/attendances/{attendance_id}", json=data))
