from __future__ import annotations

from typing import Any, Protocol, Sequence

from .model import Attendance


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[Attendance]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> Attendance:
        raise NotImplementedError

    def update(self, attendance_id: int, data: dict[str, Any]) -> Attendance:
        raise NotImplementedError
