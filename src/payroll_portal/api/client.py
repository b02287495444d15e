from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import requests

from ..core.exceptions import ApiError, NotFoundError

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


def _no_token() -> Optional[str]:
    return None


class ApiClient:
    """Thin wrapper around requests.Session for the backend REST API.

    Every call attaches `Authorization: Bearer <token>` when a token is
    available (explicit `token=` wins over the provider) and turns non-2xx
    responses into ApiError.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30,
        token_provider: Optional[TokenProvider] = None,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._token_provider = token_provider or _no_token
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        token: Optional[str] = None,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        data: Any = None,
        files: Any = None,
        authenticated: bool = True,
    ) -> Any:
        url = f"{self._base_url}{endpoint}"
        if token is None and authenticated:
            token = self._token_provider()

        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug("API request %s %s token=%s", method, url, "[REDACTED]" if token else None)
        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                json=json,
                params=params,
                data=data,
                files=files,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("API request %s %s failed: %s", method, url, e)
            raise ApiError(f"Could not reach the API: {e}", status=0)

        logger.debug("API response %s %s -> %s", method, url, response.status_code)
        if not response.ok:
            raise self._to_error(response)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _to_error(self, response: requests.Response) -> ApiError:
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        status = response.status_code
        logger.warning("API error %s: %s", status, payload.get("message"))

        if status == 401:
            return ApiError("Unauthorized: Invalid or missing token.", status=status, payload=payload)
        if status == 403:
            return ApiError("Forbidden: You lack permission to access this resource.", status=status, payload=payload)

        message = payload.get("message") or f"HTTP error! Status: {status}"
        if status == 404:
            return NotFoundError(message, payload=payload)
        return ApiError(message, status=status, payload=payload)

    def get(self, endpoint: str, **kwargs: Any) -> Any:
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, **kwargs: Any) -> Any:
        return self.request("POST", endpoint, **kwargs)

    def put(self, endpoint: str, **kwargs: Any) -> Any:
        return self.request("PUT", endpoint, **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> Any:
        return self.request("DELETE", endpoint, **kwargs)
