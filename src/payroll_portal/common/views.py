"""Helpers shared by the feature controllers."""
from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import flash, g, render_template, request

from ..core.exceptions import ApiError, AuthenticationError, DomainError, NotFoundError, ValidationError
from .validators import optional_int

logger = logging.getLogger(__name__)


def forbidden():
    return render_template("403.html"), 403


def role_required(*roles: str):
    """Only users whose `role_name` is one of `roles` reach the view."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            auth = g.get("auth")
            if not auth or auth.role_name not in roles:
                logger.info("Role %s denied for %s", auth.role_name if auth else None, request.path)
                return forbidden()
            return view(*args, **kwargs)

        return wrapper

    return decorator


def flash_error(e: Exception, fallback: str) -> None:
    """Flash a domain error's message, or log the unexpected one and flash `fallback`."""
    if isinstance(e, (ValidationError, AuthenticationError)):
        flash(str(e), "warning")
    elif isinstance(e, DomainError):
        flash(str(e), "danger")
    else:
        logger.exception(fallback)
        flash(fallback, "danger")


def page_arg(name: str = "page", default: int = 1) -> int:
    return max(1, optional_int(request.args.get(name)) or default)


def form_dict(*fields: str) -> dict[str, Any]:
    return {f: request.form.get(f, "").strip() for f in fields}


def indexed_rows(prefix: str, fields: tuple[str, ...]) -> list[dict[str, Any]]:
    """Collect `prefix[i][field]` form keys (and files) into a list of dicts."""
    rows: dict[int, dict[str, Any]] = {}
    for source in (request.form, request.files):
        for key in source.keys():
            if not key.startswith(prefix + "["):
                continue
            try:
                idx_s, field = key[len(prefix) + 1:].rstrip("]").split("][", 1)
                idx = int(idx_s)
            except ValueError:
                continue
            if field in fields:
                rows.setdefault(idx, {})[field] = source.get(key)
    return [rows[i] for i in sorted(rows)]


def is_not_found(e: Exception) -> bool:
    return isinstance(e, NotFoundError) or (isinstance(e, ApiError) and e.status == 404)


def current_employee_id() -> Optional[int]:
    auth = g.get("auth")
    return auth.employee_id if auth else None
