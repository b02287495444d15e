from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..core.exceptions import ApiError, NotFoundError
from .model import Shift
from .repository import ShiftRepository


def _with_schedule(data: dict[str, Any]) -> dict[str, Any]:
    body = dict(data)
    body["schedule_settings"] = body.get("schedule_settings") or []
    return body


class ApiShiftRepository(ShiftRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Shift]:
        payload = self._client.get("/shifts") or {}
        return [Shift.from_dict(r) for r in payload.get("shifts") or []]

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        try:
            payload = self._client.get(f"/shifts/{shift_id}")
        except NotFoundError:
            return None
        return Shift.from_dict(payload["shift"])

    def _expect_shift(self, payload: Any) -> Shift:
        if not isinstance(payload, dict) or not payload.get("shift"):
            raise ApiError("Invalid server response: 'shift' object missing", status=200)
        return Shift.from_dict(payload["shift"])

    def create(self, data: dict[str, Any]) -> Shift:
        return self._expect_shift(self._client.post("/shifts", json=_with_schedule(data)))

    def update(self, shift_id: int, data: dict[str, Any]) -> Shift:
        return self._expect_shift(self._client.put(f"/shifts/{shift_id}", json=_with_schedule(data)))

    def delete(self, shift_id: int) -> None:
        self._client.delete(f"/shifts/{shift_id}")
