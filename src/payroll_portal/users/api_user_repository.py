from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..core.exceptions import NotFoundError
from .model import User
from .repository import UserRepository


class ApiUserRepository(UserRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[User]:
        rows = self._client.get("/users") or []
        return [User.from_dict(r) for r in rows]

    def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            return User.from_dict(self._client.get(f"/users/{user_id}"))
        except NotFoundError:
            return None

    def create(self, data: dict[str, Any]) -> User:
        return User.from_dict(self._client.post("/users", json=data))

    def update(self, user_id: int, data: dict[str, Any]) -> User:
        return User.from_dict(self._client.put(f"/users/{user_id}", json=data))

    def delete(self, user_id: int) -> None:
        self._client.delete(f"/users/{user_id}")
