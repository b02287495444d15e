from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..api.pagination import Page
from ..common.validators import optional_int
from ..core.constants import DEFAULT_PAYROLL_CONFIG, PAYROLL_PER_PAGE
from ..core.exceptions import ValidationError
from .model import PayrollConfig, PayrollCycle
from .repository import PayrollConfigRepository, PayrollCycleRepository

DAY_FIELDS = ("first_start_day", "first_end_day", "second_start_day", "second_end_day")
INVALID_RANGE = "Invalid day range or offset."


@dataclass(frozen=True)
class PayrollCycleView:
    cycles: list[PayrollCycle]
    configs: list[PayrollConfig]
    current_page: int = 1
    last_page: int = 1
    total: int = 0


def _to_int(value: Any) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(INVALID_RANGE)


def _ordering_ok(values: dict[str, Optional[int]]) -> bool:
    pairs = (
        ("first_start_day", "first_end_day", False),
        ("second_start_day", "second_end_day", False),
        ("first_end_day", "second_start_day", True),
    )
    for lo, hi, strict in pairs:
        a, b = values.get(lo), values.get(hi)
        if a is None or b is None:
            continue
        if (a >= b) if strict else (a > b):
            return False
    return True


def validate_config(data: dict[str, Any]) -> PayrollConfig:
    """Full validation used when creating a configuration."""
    month = (data.get("start_year_month") or "").strip()
    try:
        datetime.strptime(month, "%Y-%m")
    except ValueError:
        raise ValidationError(INVALID_RANGE)

    values = {f: _to_int(data.get(f)) for f in DAY_FIELDS + ("pay_date_offset",)}
    if any(v is None for v in values.values()):
        raise ValidationError(INVALID_RANGE)

    if any(not 1 <= values[f] <= 31 for f in DAY_FIELDS) or values["pay_date_offset"] < 0:
        raise ValidationError(INVALID_RANGE)
    if not _ordering_ok(values):
        raise ValidationError(INVALID_RANGE)

    return PayrollConfig(id=None, start_year_month=month, **values)


def validate_config_update(data: dict[str, Any]) -> dict[str, Any]:
    """Partial validation: only provided fields are checked and sent."""
    body: dict[str, Any] = {}
    month = (data.get("start_year_month") or "").strip()
    if month:
        try:
            datetime.strptime(month, "%Y-%m")
        except ValueError:
            raise ValidationError("Start month must be in YYYY-MM format.")
        body["start_year_month"] = month

    values = {f: _to_int(data.get(f)) for f in DAY_FIELDS + ("pay_date_offset",)}
    for f in DAY_FIELDS:
        if values[f] is not None and not 1 <= values[f] <= 31:
            raise ValidationError(INVALID_RANGE)
    if values["pay_date_offset"] is not None and values["pay_date_offset"] < 0:
        raise ValidationError(INVALID_RANGE)
    if not _ordering_ok(values):
        raise ValidationError(INVALID_RANGE)

    body.update({k: v for k, v in values.items() if v is not None})
    return body


class PayrollCycleService:
    def __init__(self, cycles: PayrollCycleRepository, configs: PayrollConfigRepository):
        self._cycles = cycles
        self._configs = configs

    def load(self, page: int = 1, per_page: int = PAYROLL_PER_PAGE) -> PayrollCycleView:
        result: Page[PayrollCycle] = self._cycles.list_page(page, per_page)
        return PayrollCycleView(
            cycles=list(result.data),
            configs=list(self._configs.list_all()),
            current_page=result.current_page,
            last_page=result.last_page,
            total=result.total,
        )

    def default_config(self) -> PayrollConfig:
        return PayrollConfig(id=None, **DEFAULT_PAYROLL_CONFIG)

    def add_config(self, data: dict[str, Any]) -> PayrollConfig:
        config = validate_config(data)
        self._configs.create(config.to_payload())
        return config

    def edit_config(self, config_id: Any, data: dict[str, Any]) -> dict[str, Any]:
        config_id = optional_int(config_id)
        if not config_id:
            raise ValidationError("Configuration ID is required.")
        body = validate_config_update(data)
        self._configs.update(config_id, body)
        return body

    def add_cycle(self, data: dict[str, Any]) -> PayrollCycle:
        start, end, pay = data.get("start_date"), data.get("end_date"), data.get("pay_date")
        if not start or not end or not pay:
            raise ValidationError("Start, end and pay dates are required.")
        if start > end:
            raise ValidationError("Start date must be on or before end date.")
        return self._cycles.create({"start_date": start, "end_date": end, "pay_date": pay})

    def remove_cycle(self, cycle_id: int) -> None:
        self._cycles.delete(cycle_id)
