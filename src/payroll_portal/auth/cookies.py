"""The auth cookie pair: `auth_token` (bearer token) and `user` (JSON)."""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from flask import Request, Response, current_app

from ..core.constants import AUTH_TOKEN_COOKIE, AUTH_USER_COOKIE, DEFAULT_COOKIE_MAX_AGE
from .model import AuthState

logger = logging.getLogger(__name__)


def set_token(response: Response, name: str, value: str) -> None:
    response.set_cookie(
        name,
        value,
        max_age=int(current_app.config.get("AUTH_COOKIE_MAX_AGE", DEFAULT_COOKIE_MAX_AGE)),
        path="/",
        httponly=True,
        secure=bool(current_app.config.get("SESSION_COOKIE_SECURE", False)),
        samesite="Lax",
    )


def set_auth_cookies(response: Response, token: str, user: Any) -> None:
    user_value = user if isinstance(user, str) else json.dumps(user)
    set_token(response, AUTH_TOKEN_COOKIE, token)
    set_token(response, AUTH_USER_COOKIE, user_value)


def clear_auth_cookies(response: Response) -> None:
    response.delete_cookie(AUTH_TOKEN_COOKIE, path="/")
    response.delete_cookie(AUTH_USER_COOKIE, path="/")


def get_cookie(request: Request, name: str) -> Optional[str]:
    return request.cookies.get(name) or None


def read_user(request: Request) -> Optional[dict[str, Any]]:
    raw = get_cookie(request, AUTH_USER_COOKIE)
    if not raw:
        return None
    try:
        user = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed user cookie")
        return None
    return user if isinstance(user, dict) else None


def read_auth_state(request: Request) -> AuthState:
    return AuthState(token=get_cookie(request, AUTH_TOKEN_COOKIE), user=read_user(request))
