from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login fails or no session token is available."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ApiError(DomainError):
    """Raised when the backend API answers with a non-2xx status."""

    def __init__(self, message: str, *, status: int = 0, payload: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.status = status
        self.payload = payload or {}


class NotFoundError(ApiError):
    """Raised when the backend has no record for the requested id."""

    def __init__(self, message: str, *, payload: Optional[dict[str, Any]] = None):
        super().__init__(message, status=404, payload=payload)
