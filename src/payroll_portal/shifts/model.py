from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..employees.model import Employee


@dataclass(frozen=True)
class DaySchedule:
    day: str
    is_rest_day: bool
    hours: str

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "DaySchedule":
        return cls(day=d.get("day") or "", is_rest_day=bool(d.get("is_rest_day")), hours=d.get("hours") or "")

    def to_payload(self) -> dict[str, Any]:
        return {"day": self.day, "is_rest_day": self.is_rest_day, "hours": self.hours}


@dataclass(frozen=True)
class Shift:
    """Domain entity: a work schedule shared by one or more employees."""

    id: Optional[int]
    employee_ids: list[int]
    start_date: str
    end_date: str
    description: str = ""
    schedule_settings: list[DaySchedule] = field(default_factory=list)
    is_group_schedule: bool = False
    employees: list[Employee] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Shift":
        return cls(
            id=int(d["id"]) if d.get("id") is not None else None,
            employee_ids=[int(x) for x in d.get("employee_ids") or []],
            start_date=d.get("start_date") or "",
            end_date=d.get("end_date") or "",
            description=d.get("description") or "",
            schedule_settings=[DaySchedule.from_dict(x) for x in d.get("schedule_settings") or []],
            is_group_schedule=bool(d.get("isGroupSchedule")),
        )
