"""Route guard: cookie presence decides who reaches the protected pages."""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from flask import Flask, g, redirect, request

from .auth.cookies import read_auth_state
from .core.constants import DEFAULT_AFTER_LOGIN, LOGIN_PATH, PROTECTED_PREFIXES

logger = logging.getLogger(__name__)


def is_protected(path: str) -> bool:
    return any(path.startswith(prefix) for prefix in PROTECTED_PREFIXES)


def guard_redirect(path: str, token: Optional[str], referer: Optional[str]) -> Optional[str]:
    """Where to send the request, or None to let it through."""
    if not token and is_protected(path):
        return f"{LOGIN_PATH}?redirect={quote(path)}"
    if token and path.startswith(LOGIN_PATH):
        if referer and LOGIN_PATH not in referer:
            return referer
        return DEFAULT_AFTER_LOGIN
    return None


def register(app: Flask) -> None:
    @app.before_request
    def load_auth_state():
        g.auth = read_auth_state(request)

    @app.before_request
    def route_guard():
        path = request.path
        if path.startswith("/api/") or path.startswith(app.static_url_path or "/static"):
            return None

        target = guard_redirect(path, g.auth.token, request.headers.get("Referer"))
        if target is None:
            logger.debug("Allowing access to %s", path)
            return None
        logger.debug("Redirecting %s -> %s", path, target)
        return redirect(target)

    @app.context_processor
    def inject_auth():
        auth = g.get("auth")
        return {
            "current_user": auth.user if auth else None,
            "is_authenticated": bool(auth and auth.is_authenticated),
            "user_role": auth.role_name if auth else None,
            "user_display_name": auth.display_name if auth else "",
        }
