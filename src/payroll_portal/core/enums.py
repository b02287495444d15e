from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    EMPLOYEE = "Employee"
    HR = "HR"
    ADMIN = "Admin"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    ON_LEAVE = "On Leave"
    RESIGNED = "Resigned"
    TERMINATED = "Terminated"


class PayPeriod(str, Enum):
    MONTHLY = "monthly"
    BI_WEEKLY = "bi-weekly"
    WEEKLY = "weekly"
    DAILY = "daily"


class PayrollStatus(str, Enum):
    """Lifecycle of a payroll run as reported by the backend."""

    PENDING = "pending"
    PROCESSED = "processed"
    PAID = "paid"


class PayrollItemType(str, Enum):
    EARNING = "earning"
    DEDUCTION = "deduction"
    CONTRIBUTION = "contribution"


class PayrollItemScope(str, Enum):
    """Whether an item applies to every employee or to one of them."""

    GLOBAL = "global"
    SPECIFIC = "specific"
