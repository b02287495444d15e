"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

AUTH_TOKEN_COOKIE = "auth_token"
AUTH_USER_COOKIE = "user"
DEFAULT_COOKIE_MAX_AGE = 60 * 60 * 24 * 7

DEFAULT_ITEMS_PER_PAGE = 10
DESIGNATIONS_PER_PAGE = 7
DEPARTMENTS_PER_PAGE = 7
HOLIDAYS_PER_PAGE = 100
PAYROLL_PER_PAGE = 10

PROTECTED_PREFIXES = (
    "/dashboard",
    "/users",
    "/employees",
    "/salary",
    "/payroll",
    "/attendance",
    "/settings",
    "/profile",
)
LOGIN_PATH = "/login"
DEFAULT_AFTER_LOGIN = "/dashboard"

# Payslip categories billed per hour; the backend does not send hours yet.
HOURLY_EARNING_CATEGORIES = ("Overtime Pay", "Holiday Pay")
DEFAULT_BILLED_HOURS = 5

# Pre-filled values of the payroll configuration form.
DEFAULT_PAYROLL_CONFIG = {
    "start_year_month": "2025-03",
    "first_start_day": 1,
    "first_end_day": 15,
    "second_start_day": 16,
    "second_end_day": 30,
    "pay_date_offset": 3,
}
