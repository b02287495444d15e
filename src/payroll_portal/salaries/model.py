from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..common.money import to_decimal
from ..common.validators import optional_int
from ..core.enums import PayPeriod
from ..employees.model import Employee


@dataclass(frozen=True)
class Salary:
    """Domain entity: an employee's basic salary and pay period."""

    id: int
    employee_id: int
    basic_salary: Decimal
    pay_period: str = PayPeriod.MONTHLY.value
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    employee: Optional[Employee] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Salary":
        return cls(
            id=int(d["id"]),
            employee_id=int(d["employee_id"]),
            basic_salary=to_decimal(d.get("basic_salary")),
            pay_period=d.get("pay_period") or PayPeriod.MONTHLY.value,
            start_date=d.get("start_date"),
            end_date=d.get("end_date"),
            is_active=bool(optional_int(d.get("isActive")) if d.get("isActive") is not None else 1),
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )
