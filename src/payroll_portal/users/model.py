from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import optional_int
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a login account on the backend.

    Note: plain data object; the backend owns persistence.
    """

    id: int
    lastname: str
    firstname: str
    email: str
    role_name: str
    middlename: str = ""
    extension: str = ""
    company_id_number: str = ""
    profile_image: Optional[str] = None
    phone_number: Optional[str] = None
    employee_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "User":
        return cls(
            id=int(d["id"]),
            lastname=d.get("lastname") or "",
            firstname=d.get("firstname") or "",
            middlename=d.get("middlename") or "",
            extension=d.get("extension") or "",
            email=d.get("email") or "",
            role_name=d.get("role_name") or Role.EMPLOYEE.value,
            company_id_number=d.get("company_id_number") or "",
            profile_image=d.get("profile_image"),
            phone_number=d.get("phone_number"),
            employee_id=optional_int(d.get("employee_id")),
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )

    @property
    def full_name(self) -> str:
        parts = [self.firstname, self.middlename, self.lastname, self.extension]
        return " ".join(p for p in parts if p)

    @property
    def display_name(self) -> str:
        """'Lastname, Firstname Middlename' as used in tables."""
        given = " ".join(p for p in [self.firstname, self.middlename] if p)
        return f"{self.lastname}, {given}" if given else self.lastname
