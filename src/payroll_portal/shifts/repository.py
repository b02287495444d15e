from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> Shift:
        raise NotImplementedError

    def update(self, shift_id: int, data: dict[str, Any]) -> Shift:
        raise NotImplementedError

    def delete(self, shift_id: int) -> None:
        raise NotImplementedError
