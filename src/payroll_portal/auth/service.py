from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_non_empty
from ..core.exceptions import ApiError, AuthenticationError, ValidationError
from .model import LoginResult
from .repository import AuthRepository

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, auth: AuthRepository):
        self._auth = auth

    def login(self, email: str, password: str) -> LoginResult:
        try:
            email = require_non_empty(email, "Email")
            password = require_non_empty(password, "Password")
            payload = self._auth.login(email, password)
        except (ApiError, ValidationError) as e:
            logger.info("Login failed for %s: %s", email, e)
            raise AuthenticationError("Login failed")

        token = payload.get("access_token")
        if not token:
            logger.warning("Login response for %s carried no access_token", email)
            raise AuthenticationError("Login failed")
        return LoginResult(token=token, user=payload.get("user"), payload=payload)

    def register(self, data: dict[str, Any]) -> LoginResult:
        """Raises ApiError (with the backend's status) when registration is refused."""
        if data.get("password") != data.get("password_confirmation"):
            raise ValidationError("Passwords do not match")

        try:
            payload = self._auth.register(data)
        except ApiError as e:
            message = e.payload.get("message") if e.payload else None
            raise ApiError(message or "Registration failed", status=e.status or 500, payload=e.payload)

        token = payload.get("access_token")
        if not token:
            raise ApiError("Registration failed", status=500, payload=payload)
        return LoginResult(token=token, user=payload.get("user"), payload=payload)
