from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import require_min_length, require_non_empty
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import User
from .repository import UserRepository


@dataclass(frozen=True)
class UserView:
    users: list[User]


class UserService:
    def __init__(self, users: UserRepository):
        self._users = users

    def load(self) -> UserView:
        return UserView(users=list(self._users.list_all()))

    def get(self, user_id: int) -> Optional[User]:
        return self._users.get_by_id(user_id)

    @staticmethod
    def _clean(data: dict[str, Any], *, is_update: bool) -> dict[str, Any]:
        body = {k: v for k, v in data.items() if v not in (None, "")}
        require_non_empty(body.get("lastname"), "Last name")
        require_non_empty(body.get("firstname"), "First name")
        require_non_empty(body.get("email"), "Email")

        role = body.get("role_name") or Role.EMPLOYEE.value
        try:
            body["role_name"] = Role(role).value
        except ValueError:
            raise ValidationError("Invalid role")

        password = body.get("password")
        if password or not is_update:
            require_min_length(password, "Password", 8)
            if body.get("password_confirmation") not in (None, password):
                raise ValidationError("Passwords do not match")
        return body

    def add_user(self, data: dict[str, Any]) -> User:
        return self._users.create(self._clean(data, is_update=False))

    def edit_user(self, user_id: int, data: dict[str, Any]) -> User:
        return self._users.update(user_id, self._clean(data, is_update=True))

    def remove_user(self, user_id: int) -> None:
        self._users.delete(user_id)
