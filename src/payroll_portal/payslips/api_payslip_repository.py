from __future__ import annotations

from typing import Sequence

from ..api.client import ApiClient
from ..core.exceptions import NotFoundError
from .model import Company, Payslip
from .repository import CompanyRepository, PayslipRepository


class ApiPayslipRepository(PayslipRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Payslip]:
        rows = self._client.get("/payslips") or []
        return [Payslip.from_dict(r) for r in rows]

    def get_by_id(self, payslip_id: int) -> Payslip:
        try:
            payload = self._client.get(f"/payslips/{payslip_id}")
        except NotFoundError as e:
            raise NotFoundError("Payslip not found", payload=e.payload)
        return Payslip.from_dict(payload)


class ApiCompanyRepository(CompanyRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Company]:
        rows = self._client.get("/company-details") or []
        if isinstance(rows, dict):
            rows = [rows]
        return [Company.from_dict(r) for r in rows]
