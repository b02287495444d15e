"""HTTP access to the HR/payroll backend API."""
from .client import ApiClient
from .pagination import Page, collect_all_pages

__all__ = ["ApiClient", "Page", "collect_all_pages"]
