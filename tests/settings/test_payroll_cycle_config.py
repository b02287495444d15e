from __future__ import annotations

import pytest

from payroll_portal.api.pagination import Page
from payroll_portal.core.exceptions import ValidationError
from payroll_portal.payroll_cycles.model import PayrollCycle
from payroll_portal.payroll_cycles.service import (
    INVALID_RANGE,
    PayrollCycleService,
    validate_config,
    validate_config_update,
)

VALID = {
    "start_year_month": "2025-03",
    "first_start_day": "1",
    "first_end_day": "15",
    "second_start_day": "16",
    "second_end_day": "30",
    "pay_date_offset": "3",
}


class InMemoryCycles:
    def __init__(self):
        self.created = []
        self.deleted = []

    def list_page(self, page=1, per_page=10):
        cycles = [PayrollCycle(id=1, start_date="2025-03-01", end_date="2025-03-15", pay_date="2025-03-18")]
        return Page(data=cycles, current_page=page, last_page=4, per_page=per_page, total=40)

    def create(self, data):
        self.created.append(data)
        return PayrollCycle(id=2, **data)

    def delete(self, cycle_id):
        self.deleted.append(cycle_id)


class InMemoryConfigs:
    def __init__(self):
        self.created = []
        self.updated = []

    def list_all(self):
        return []

    def create(self, data):
        self.created.append(data)

    def update(self, config_id, data):
        self.updated.append((config_id, data))


def test_valid_config_is_converted_to_ints():
    config = validate_config(VALID)

    assert config.first_end_day == 15
    assert config.to_payload()["pay_date_offset"] == 3


@pytest.mark.parametrize("override", [{"second_end_day": ""}, {"pay_date_offset": None}, {"first_end_day": "abc"}])
def test_missing_or_non_integer_field_is_invalid_range(override):
    with pytest.raises(ValidationError) as exc:
        validate_config(dict(VALID, **override))

    assert str(exc.value) == INVALID_RANGE


def test_bad_month_format():
    with pytest.raises(ValidationError) as exc:
        validate_config(dict(VALID, start_year_month="03/2025"))

    assert str(exc.value) == INVALID_RANGE


@pytest.mark.parametrize(
    "override",
    [
        {"first_start_day": "0"},
        {"second_end_day": "32"},
        {"pay_date_offset": "-1"},
        {"first_start_day": "16", "first_end_day": "15"},
        {"first_end_day": "16", "second_start_day": "16"},
    ],
)
def test_invalid_ranges(override):
    with pytest.raises(ValidationError) as exc:
        validate_config(dict(VALID, **override))

    assert str(exc.value) == INVALID_RANGE


def test_partial_update_sends_only_given_fields():
    body = validate_config_update({"pay_date_offset": "5", "first_end_day": ""})

    assert body == {"pay_date_offset": 5}


def test_partial_update_checks_order_of_given_pair():
    with pytest.raises(ValidationError):
        validate_config_update({"first_end_day": "20", "second_start_day": "16"})


def test_edit_config_requires_id():
    service = PayrollCycleService(InMemoryCycles(), InMemoryConfigs())

    with pytest.raises(ValidationError, match="Configuration ID is required."):
        service.edit_config("", {"pay_date_offset": "2"})


def test_add_config_posts_payload():
    configs = InMemoryConfigs()
    PayrollCycleService(InMemoryCycles(), configs).add_config(VALID)

    assert configs.created[0]["start_year_month"] == "2025-03"
    assert configs.created[0]["second_start_day"] == 16


def test_load_exposes_page_metadata():
    view = PayrollCycleService(InMemoryCycles(), InMemoryConfigs()).load(2)

    assert view.current_page == 2
    assert view.last_page == 4
    assert view.cycles[0].label == "2025-03-01 to 2025-03-15"


def test_add_cycle_rejects_reversed_dates():
    cycles = InMemoryCycles()

    with pytest.raises(ValidationError):
        PayrollCycleService(cycles, InMemoryConfigs()).add_cycle(
            {"start_date": "2025-03-15", "end_date": "2025-03-01", "pay_date": "2025-03-18"}
        )
    assert cycles.created == []
