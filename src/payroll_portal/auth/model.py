from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class AuthState:
    """What the browser's cookies say about the current visitor."""

    token: Optional[str] = None
    user: Optional[dict[str, Any]] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def role_name(self) -> Optional[str]:
        return (self.user or {}).get("role_name")

    @property
    def employee_id(self) -> Optional[int]:
        value = (self.user or {}).get("employee_id")
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @property
    def display_name(self) -> str:
        u = self.user or {}
        name = " ".join(p for p in [u.get("firstname"), u.get("lastname")] if p)
        return name or u.get("name") or u.get("email") or ""


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: Any
    payload: dict[str, Any]
