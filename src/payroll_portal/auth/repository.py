from __future__ import annotations

from typing import Any, Protocol


class AuthRepository(Protocol):
    def login(self, email: str, password: str) -> dict[str, Any]:
        raise NotImplementedError

    def register(self, data: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError
