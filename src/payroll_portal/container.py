from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .api.client import ApiClient, TokenProvider
from .attendance.api_attendance_repository import ApiAttendanceRepository
from .attendance.geocoding import ReverseGeocoder
from .attendance.service import AttendanceService
from .auth.api_auth_repository import ApiAuthRepository
from .auth.service import AuthService
from .dashboard.service import DashboardService
from .employees.api_employee_repository import ApiEmployeeRepository
from .employees.service import EmployeeService
from .organization.api_organization_repository import (
    ApiDepartmentRepository,
    ApiDesignationRepository,
    ApiHolidayRepository,
)
from .organization.service import DepartmentService, DesignationService, HolidayService
from .payroll.api_payroll_repository import ApiPayrollItemRepository, ApiPayrollRepository
from .payroll.service import PayrollItemService, PayrollService
from .payroll_cycles.api_payroll_cycle_repository import ApiPayrollConfigRepository, ApiPayrollCycleRepository
from .payroll_cycles.service import PayrollCycleService
from .payslips.api_payslip_repository import ApiCompanyRepository, ApiPayslipRepository
from .payslips.service import PayslipService
from .salaries.api_salary_repository import ApiSalaryRepository
from .salaries.service import SalaryService
from .shifts.api_shift_repository import ApiShiftRepository
from .shifts.service import ShiftService
from .users.api_user_repository import ApiUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    client: ApiClient
    geocoder: ReverseGeocoder

    auth_service: AuthService
    user_service: UserService
    employee_service: EmployeeService
    department_service: DepartmentService
    designation_service: DesignationService
    holiday_service: HolidayService
    shift_service: ShiftService
    attendance_service: AttendanceService
    salary_service: SalaryService
    payroll_service: PayrollService
    payroll_item_service: PayrollItemService
    payroll_cycle_service: PayrollCycleService
    payslip_service: PayslipService
    dashboard_service: DashboardService


def build_container(
    *,
    api_base_url: str,
    timeout: float = 30,
    token_provider: Optional[TokenProvider] = None,
    session: Optional[requests.Session] = None,
    currency: str = "PHP",
) -> Container:
    client = ApiClient(api_base_url, timeout=timeout, token_provider=token_provider, session=session)

    users_repo = ApiUserRepository(client)
    employees_repo = ApiEmployeeRepository(client)
    departments_repo = ApiDepartmentRepository(client)
    designations_repo = ApiDesignationRepository(client)
    holidays_repo = ApiHolidayRepository(client)
    shifts_repo = ApiShiftRepository(client)
    attendance_repo = ApiAttendanceRepository(client)
    salaries_repo = ApiSalaryRepository(client)
    payrolls_repo = ApiPayrollRepository(client)
    payroll_items_repo = ApiPayrollItemRepository(client)
    cycles_repo = ApiPayrollCycleRepository(client)
    configs_repo = ApiPayrollConfigRepository(client)
    payslips_repo = ApiPayslipRepository(client)
    companies_repo = ApiCompanyRepository(client)

    return Container(
        client=client,
        geocoder=ReverseGeocoder(user_agent="payroll-portal/1.0", session=session),
        auth_service=AuthService(ApiAuthRepository(client)),
        user_service=UserService(users_repo),
        employee_service=EmployeeService(employees_repo, departments_repo, designations_repo),
        department_service=DepartmentService(departments_repo),
        designation_service=DesignationService(designations_repo, departments_repo),
        holiday_service=HolidayService(holidays_repo),
        shift_service=ShiftService(shifts_repo, employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        salary_service=SalaryService(salaries_repo, employees_repo),
        payroll_service=PayrollService(payrolls_repo, payroll_items_repo, salaries_repo, employees_repo),
        payroll_item_service=PayrollItemService(payroll_items_repo, employees_repo, cycles_repo),
        payroll_cycle_service=PayrollCycleService(cycles_repo, configs_repo),
        payslip_service=PayslipService(payslips_repo, companies_repo, payroll_items_repo, currency=currency),
        dashboard_service=DashboardService(employees_repo, attendance_repo),
    )
