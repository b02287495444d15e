from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..employees.model import Employee


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one time-clock record (one employee, one date)."""

    id: int
    employee_id: int
    date: str
    clock_in: str
    clock_in_location: Optional[str] = None
    clock_out: Optional[str] = None
    clock_out_location: Optional[str] = None
    missing_time_out: bool = False
    worked_hours: Optional[float] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    employee: Optional[Employee] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Attendance":
        worked = d.get("worked_hours")
        return cls(
            id=int(d["id"]),
            employee_id=int(d["employee_id"]),
            date=(d.get("date") or "")[:10],
            clock_in=d.get("clock_in") or "",
            clock_in_location=d.get("clock_in_location"),
            clock_out=d.get("clock_out"),
            clock_out_location=d.get("clock_out_location"),
            missing_time_out=bool(int(d.get("missing_time_out") or 0)),
            worked_hours=float(worked) if worked not in (None, "") else None,
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )
