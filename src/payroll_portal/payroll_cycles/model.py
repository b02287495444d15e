from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import optional_int


@dataclass(frozen=True)
class PayrollCycle:
    """Domain entity: a dated pay period generated by the backend."""

    id: int
    start_date: str
    end_date: str
    pay_date: str
    payroll_config_id: Optional[int] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "PayrollCycle":
        return cls(
            id=int(d["id"]),
            start_date=(d.get("start_date") or "")[:10],
            end_date=(d.get("end_date") or "")[:10],
            pay_date=(d.get("pay_date") or "")[:10],
            payroll_config_id=optional_int(d.get("payroll_config_id")),
        )

    @property
    def label(self) -> str:
        return f"{self.start_date} to {self.end_date}"


@dataclass(frozen=True)
class PayrollConfig:
    """Template of the two half-month ranges the backend turns into cycles."""

    id: Optional[int]
    start_year_month: str
    first_start_day: int
    first_end_day: int
    second_start_day: int
    second_end_day: int
    pay_date_offset: int

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "PayrollConfig":
        return cls(
            id=optional_int(d.get("id")),
            start_year_month=d.get("start_year_month") or "",
            first_start_day=int(d.get("first_start_day") or 0),
            first_end_day=int(d.get("first_end_day") or 0),
            second_start_day=int(d.get("second_start_day") or 0),
            second_end_day=int(d.get("second_end_day") or 0),
            pay_date_offset=int(d.get("pay_date_offset") or 0),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "start_year_month": self.start_year_month,
            "first_start_day": self.first_start_day,
            "first_end_day": self.first_end_day,
            "second_start_day": self.second_start_day,
            "second_end_day": self.second_end_day,
            "pay_date_offset": self.pay_date_offset,
        }
