from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..common.money import to_decimal
from ..common.validators import optional_int


@dataclass(frozen=True)
class PayslipPerson:
    firstname: str
    lastname: str
    middlename: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(p for p in [self.firstname, self.middlename, self.lastname] if p)


@dataclass(frozen=True)
class PayslipEmployee:
    """Employee snapshot embedded in a payslip (government ids included)."""

    id: int
    company_id_number: str
    address: Optional[str] = None
    sss_id: Optional[str] = None
    philhealth_id: Optional[str] = None
    pagibig_id: Optional[str] = None
    tin: Optional[str] = None
    tax: Optional[str] = None
    user: Optional[PayslipPerson] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "PayslipEmployee":
        u = d.get("user")
        return cls(
            id=int(d["id"]),
            company_id_number=d.get("company_id_number") or "",
            address=d.get("address"),
            sss_id=d.get("sss_id"),
            philhealth_id=d.get("philhealth_id"),
            pagibig_id=d.get("pagibig_id"),
            tin=d.get("tin"),
            tax=d.get("tax"),
            user=PayslipPerson(
                firstname=u.get("firstname") or "",
                lastname=u.get("lastname") or "",
                middlename=u.get("middlename"),
                email=u.get("email"),
                phone_number=u.get("phone_number"),
            )
            if isinstance(u, dict)
            else None,
        )


@dataclass(frozen=True)
class PayslipCycle:
    id: int
    start_date: str
    end_date: str
    pay_date: str


@dataclass(frozen=True)
class PayslipSalary:
    id: int
    basic_salary: Decimal
    pay_period: str


@dataclass(frozen=True)
class Payslip:
    """Read-only summary issued per employee per payroll cycle."""

    id: int
    payroll_id: Optional[int]
    payroll_cycles_id: Optional[int]
    employee_id: int
    salary_id: Optional[int]
    earnings: Decimal
    deductions: Decimal
    gross_salary: Decimal
    net_salary: Decimal
    issued_date: Optional[str] = None
    payment_method: Optional[str] = None
    employee: Optional[PayslipEmployee] = None
    payroll_cycle: Optional[PayslipCycle] = None
    salary: Optional[PayslipSalary] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Payslip":
        emp = d.get("employee")
        cyc = d.get("payroll_cycle")
        sal = d.get("salary")
        return cls(
            id=int(d["id"]),
            payroll_id=optional_int(d.get("payroll_id")),
            payroll_cycles_id=optional_int(d.get("payroll_cycles_id")),
            employee_id=int(d["employee_id"]),
            salary_id=optional_int(d.get("salary_id")),
            earnings=to_decimal(d.get("earnings")),
            deductions=to_decimal(d.get("deductions")),
            gross_salary=to_decimal(d.get("gross_salary")),
            net_salary=to_decimal(d.get("net_salary")),
            issued_date=d.get("issued_date"),
            payment_method=d.get("payment_method"),
            employee=PayslipEmployee.from_dict(emp) if isinstance(emp, dict) else None,
            payroll_cycle=PayslipCycle(
                id=int(cyc["id"]),
                start_date=(cyc.get("start_date") or "")[:10],
                end_date=(cyc.get("end_date") or "")[:10],
                pay_date=(cyc.get("pay_date") or "")[:10],
            )
            if isinstance(cyc, dict)
            else None,
            salary=PayslipSalary(
                id=int(sal["id"]),
                basic_salary=to_decimal(sal.get("basic_salary")),
                pay_period=sal.get("pay_period") or "",
            )
            if isinstance(sal, dict)
            else None,
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )


@dataclass(frozen=True)
class Company:
    id: int
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    logo: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Company":
        return cls(
            id=int(d["id"]),
            name=d.get("name") or "",
            address=d.get("address"),
            phone=d.get("phone"),
            email=d.get("email"),
            website=d.get("website"),
            logo=d.get("logo"),
        )
