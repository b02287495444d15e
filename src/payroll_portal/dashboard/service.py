from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.enums import EmployeeStatus, Role
from ..employees.repository import EmployeeRepository

ADMIN_ROLES = (Role.ADMIN.value, Role.HR.value)


@dataclass(frozen=True)
class DashboardView:
    total_employees: int = 0
    status_counts: dict[str, int] = field(default_factory=dict)
    headcount_by_department: dict[str, int] = field(default_factory=dict)
    clocked_in_today: int = 0
    clocked_out_today: int = 0


def landing_path(role_name: Optional[str]) -> str:
    """Where `/dashboard` sends a user of the given role."""
    if role_name in ADMIN_ROLES:
        return "/dashboard/admin"
    return "/attendance/time-clock"


class DashboardService:
    def __init__(self, employees: EmployeeRepository, attendance: AttendanceRepository):
        self._employees = employees
        self._attendance = attendance

    def load(self, *, today: Optional[date] = None) -> DashboardView:
        today_s = (today or now_local().date()).isoformat()
        employees = list(self._employees.list_all())

        statuses = Counter(e.status for e in employees)
        status_counts = {s.value: statuses.get(s.value, 0) for s in EmployeeStatus}

        headcount = Counter(e.department.department if e.department else "Unassigned" for e in employees)

        todays = [a for a in self._attendance.list_all() if a.date == today_s]
        return DashboardView(
            total_employees=len(employees),
            status_counts=status_counts,
            headcount_by_department=dict(sorted(headcount.items())),
            clocked_in_today=len(todays),
            clocked_out_today=sum(1 for a in todays if a.clock_out),
        )
