from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.validators import optional_int
from ..core.enums import EmployeeStatus
from ..organization.model import Department, Designation
from ..users.model import User


@dataclass(frozen=True)
class Dependent:
    name: str
    relationship: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Dependent":
        return cls(id=optional_int(d.get("id")), name=d.get("name") or "", relationship=d.get("relationship") or "")


@dataclass(frozen=True)
class Education:
    attainment: str
    course: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Education":
        return cls(id=optional_int(d.get("id")), attainment=d.get("attainment") or "", course=d.get("course") or "")


@dataclass(frozen=True)
class Document:
    type: str
    id: Optional[int] = None
    file_path: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Document":
        return cls(id=optional_int(d.get("id")), type=d.get("type") or "", file_path=d.get("file_path") or d.get("file"))


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee record.

    `user`, `department` and `designation` are filled either by the backend
    (nested objects) or by client-side lookups in the services.
    """

    id: int
    company_id_number: str
    user_id: Optional[int]
    department_id: Optional[int]
    designation_id: Optional[int]
    status: str = EmployeeStatus.ACTIVE.value
    birthdate: Optional[str] = None
    reports_to: Optional[str] = None
    gender: Optional[str] = None
    is_active: bool = True
    resignation_date: Optional[str] = None
    address: Optional[str] = None
    sss_id: Optional[str] = None
    philhealth_id: Optional[str] = None
    pagibig_id: Optional[str] = None
    tin: Optional[str] = None
    created_at: Optional[str] = None
    user: Optional[User] = None
    department: Optional[Department] = None
    designation: Optional[Designation] = None
    dependents: list[Dependent] = field(default_factory=list)
    education_background: list[Education] = field(default_factory=list)
    documents: list[Document] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Employee":
        user = d.get("user")
        dept = d.get("department")
        desig = d.get("designation")
        # list endpoint says education_backgrounds, detail endpoint educationBackgrounds
        education = d.get("education_background") or d.get("education_backgrounds") or d.get("educationBackgrounds") or []
        return cls(
            id=int(d["id"]),
            company_id_number=d.get("company_id_number") or "",
            user_id=optional_int(d.get("user_id")),
            department_id=optional_int(d.get("department_id")),
            designation_id=optional_int(d.get("designation_id")),
            status=d.get("status") or EmployeeStatus.ACTIVE.value,
            birthdate=d.get("birthdate"),
            reports_to=d.get("reports_to"),
            gender=d.get("gender"),
            is_active=bool(int(d.get("isActive", 1) or 0)),
            resignation_date=d.get("resignation_date"),
            address=d.get("address"),
            sss_id=d.get("sss_id"),
            philhealth_id=d.get("philhealth_id"),
            pagibig_id=d.get("pagibig_id"),
            tin=d.get("tin"),
            created_at=d.get("created_at"),
            user=User.from_dict(user) if isinstance(user, dict) and user.get("id") is not None else None,
            department=Department.from_dict(dept) if isinstance(dept, dict) else None,
            designation=Designation.from_dict(desig) if isinstance(desig, dict) else None,
            dependents=[Dependent.from_dict(x) for x in d.get("dependents") or [] if isinstance(x, dict)],
            education_background=[Education.from_dict(x) for x in education if isinstance(x, dict)],
            documents=[Document.from_dict(x) for x in d.get("documents") or [] if isinstance(x, dict)],
        )

    @property
    def display_name(self) -> str:
        if self.user:
            return self.user.display_name
        return self.company_id_number or f"Employee #{self.id}"
