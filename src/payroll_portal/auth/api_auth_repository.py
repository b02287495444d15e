from __future__ import annotations

from typing import Any

from ..api.client import ApiClient
from .repository import AuthRepository


class ApiAuthRepository(AuthRepository):
    """Login and registration go out without a bearer token."""

    def __init__(self, client: ApiClient):
        self._client = client

    def login(self, email: str, password: str) -> dict[str, Any]:
        return self._client.post("/login", json={"email": email, "password": password}, authenticated=False) or {}

    def register(self, data: dict[str, Any]) -> dict[str, Any]:
        body = {k: data.get(k) for k in ("name", "email", "password", "password_confirmation")}
        return self._client.post("/register", json=body, authenticated=False) or {}
