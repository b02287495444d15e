from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Department:
    """Domain entity: Department."""

    id: int
    department: str
    deleted_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Department":
        return cls(
            id=int(d["id"]),
            department=d.get("department") or "",
            deleted_at=d.get("deleted_at"),
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )


@dataclass(frozen=True)
class Designation:
    """Domain entity: Designation (job title) belonging to a department."""

    id: int
    designation: str
    department_id: Optional[int]
    department: Optional[Department] = None
    deleted_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Designation":
        dept = d.get("department")
        return cls(
            id=int(d["id"]),
            designation=d.get("designation") or "",
            department_id=int(d["department_id"]) if d.get("department_id") is not None else None,
            department=Department.from_dict(dept) if isinstance(dept, dict) else None,
            deleted_at=d.get("deleted_at"),
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )


@dataclass(frozen=True)
class Holiday:
    id: int
    name_holiday: str
    date_holiday: str
    type_holiday: str
    deleted_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Holiday":
        return cls(
            id=int(d["id"]),
            name_holiday=d.get("name_holiday") or "",
            date_holiday=d.get("date_holiday") or "",
            type_holiday=d.get("type_holiday") or "",
            deleted_at=d.get("deleted_at"),
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )
