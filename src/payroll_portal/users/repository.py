from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on the HTTP client.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def create(self, data: dict[str, Any]) -> User:
        raise NotImplementedError

    def update(self, user_id: int, data: dict[str, Any]) -> User:
        raise NotImplementedError

    def delete(self, user_id: int) -> None:
        raise NotImplementedError
