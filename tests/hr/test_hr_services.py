from __future__ import annotations

from decimal import Decimal

import pytest

from payroll_portal.api.pagination import Page
from payroll_portal.core.exceptions import ValidationError
from payroll_portal.employees.model import Employee
from payroll_portal.organization.model import Department, Designation, Holiday
from payroll_portal.organization.service import DepartmentService, DesignationService, HolidayService
from payroll_portal.salaries.model import Salary
from payroll_portal.salaries.service import SalaryService
from payroll_portal.shifts.model import DaySchedule, Shift
from payroll_portal.shifts.service import ShiftService
from payroll_portal.users.service import UserService


def _employee(id_, department_id=None):
    return Employee(id=id_, company_id_number=f"EMP-{id_}", user_id=None, department_id=department_id, designation_id=None)


class PagedRepo:
    """Serves `rows` in pages of `per_page`, like the Laravel paginator."""

    def __init__(self, rows):
        self.rows = rows
        self.created = []
        self.pages_requested = []

    def list_page(self, page=1, per_page=7):
        self.pages_requested.append(page)
        start = (page - 1) * per_page
        last_page = max(1, -(-len(self.rows) // per_page))
        return Page(data=self.rows[start:start + per_page], current_page=page, last_page=last_page, per_page=per_page, total=len(self.rows))

    def create(self, data):
        self.created.append(data)
        return data


class InMemoryEmployees:
    def __init__(self, rows, without_shift=None, without_salary=None):
        self.rows = rows
        self.without_shift = without_shift or []
        self.without_salary = without_salary or []

    def list_all(self):
        return self.rows

    def list_without_shift(self):
        return self.without_shift

    def list_without_salary(self):
        return self.without_salary


class InMemorySalaries:
    def __init__(self, rows):
        self.rows = rows
        self.created = []

    def list_all(self):
        return self.rows

    def create(self, data):
        self.created.append(data)
        return data


class InMemoryShifts:
    def __init__(self, rows):
        self.rows = rows
        self.created = []

    def list_all(self):
        return self.rows

    def create(self, data):
        self.created.append(data)
        return data


class InMemoryUsers:
    def __init__(self):
        self.created = []
        self.updated = []

    def create(self, data):
        self.created.append(data)
        return data

    def update(self, user_id, data):
        self.updated.append((user_id, data))
        return data


def test_departments_collects_every_page_and_hides_deleted():
    rows = [Department(id=i, department=f"D{i}") for i in range(1, 10)]
    rows.append(Department(id=10, department="Old", deleted_at="2025-01-01"))
    repo = PagedRepo(rows)

    view = DepartmentService(repo).load()

    assert len(view.departments) == 9
    assert repo.pages_requested == [1, 2]


def test_designations_join_first_page_of_departments():
    departments = PagedRepo([Department(id=i, department=f"D{i}") for i in range(1, 9)])
    designations = PagedRepo(
        [
            Designation(id=1, designation="Engineer", department_id=2),
            Designation(id=2, designation="Auditor", department_id=8),
        ]
    )

    view = DesignationService(designations, departments).load()

    assert view.designations[0].department.department == "D2"
    # department 8 is on the second page, which is not fetched
    assert view.designations[1].department is None
    assert departments.pages_requested == [1]


def test_holidays_hide_deleted():
    repo = PagedRepo(
        [
            Holiday(id=1, name_holiday="New Year", date_holiday="2025-01-01", type_holiday="Regular Holiday"),
            Holiday(id=2, name_holiday="Gone", date_holiday="2025-02-01", type_holiday="Regular Holiday", deleted_at="x"),
        ]
    )

    view = HolidayService(repo).load()

    assert [h.id for h in view.holidays] == [1]


def test_salary_view_lists_employees_without_salary():
    service = SalaryService(
        InMemorySalaries([Salary(id=1, employee_id=1, basic_salary=Decimal("100"))]),
        InMemoryEmployees([_employee(1), _employee(2)], without_salary=[_employee(2)]),
    )

    view = service.load()

    assert view.salaries[0].employee.id == 1
    assert [e.id for e in view.available_employees] == [2]


@pytest.mark.parametrize(
    "data, message",
    [
        ({"employee_id": "", "basic_salary": "100"}, "Please select an employee"),
        ({"employee_id": "1", "basic_salary": "abc"}, "Basic salary must be a number"),
        ({"employee_id": "1", "basic_salary": "-5"}, "Basic salary cannot be negative"),
        ({"employee_id": "1", "basic_salary": "5", "pay_period": "yearly"}, "Invalid pay period"),
    ],
)
def test_salary_validation(data, message):
    service = SalaryService(InMemorySalaries([]), InMemoryEmployees([]))

    with pytest.raises(ValidationError, match=message):
        service.add_salary(data)


def test_shift_load_resolves_employees():
    shift = Shift(id=1, employee_ids=[1, 3], start_date="2025-03-01", end_date="2025-03-31")
    service = ShiftService(InMemoryShifts([shift]), InMemoryEmployees([_employee(1), _employee(2)], without_shift=[_employee(2)]))

    view = service.load()

    assert [e.id for e in view.shifts[0].employees] == [1]
    assert [e.id for e in view.available_employees] == [2]


def test_group_schedule_flag_follows_employee_count():
    shifts = InMemoryShifts([])
    service = ShiftService(shifts, InMemoryEmployees([]))

    service.add_shift(
        {
            "employee_ids": ["1", "2"],
            "start_date": "2025-03-01",
            "end_date": "2025-03-31",
            "schedule_settings": [DaySchedule(day="Monday", is_rest_day=False, hours="08:00-17:00")],
        }
    )

    body = shifts.created[0]
    assert body["isGroupSchedule"] is True
    assert body["employee_ids"] == [1, 2]
    assert body["schedule_settings"] == [{"day": "Monday", "is_rest_day": False, "hours": "08:00-17:00"}]


def test_shift_requires_employees():
    with pytest.raises(ValidationError):
        ShiftService(InMemoryShifts([]), InMemoryEmployees([])).add_shift({"employee_ids": [], "start_date": "a", "end_date": "b"})


def test_new_user_needs_matching_password():
    service = UserService(InMemoryUsers())
    data = {"lastname": "Cruz", "firstname": "Ana", "email": "ana@example.com", "password": "secret123", "password_confirmation": "nope"}

    with pytest.raises(ValidationError, match="Passwords do not match"):
        service.add_user(data)


def test_user_update_without_password_is_allowed():
    users = InMemoryUsers()

    UserService(users).edit_user(4, {"lastname": "Cruz", "firstname": "Ana", "email": "ana@example.com", "role_name": "HR", "password": ""})

    assert users.updated == [(4, {"lastname": "Cruz", "firstname": "Ana", "email": "ana@example.com", "role_name": "HR"})]


def test_invalid_role_rejected():
    with pytest.raises(ValidationError, match="Invalid role"):
        UserService(InMemoryUsers()).add_user(
            {"lastname": "C", "firstname": "A", "email": "a@b.c", "role_name": "Boss", "password": "secret123"}
        )
