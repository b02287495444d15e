from __future__ import annotations

import json
from typing import Any, Optional

import pytest
import requests

from payroll_portal.container import build_container
from payroll_portal.main import create_app


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self._body = body
        self.content = b"" if body is None else json.dumps(body).encode()

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code}")


class FakeSession:
    """Answers requests from a `(METHOD, path)` routing table and records every call."""

    def __init__(self, routes: Optional[dict[tuple[str, str], FakeResponse]] = None, base: str = "http://api.test/api"):
        self.routes = routes or {}
        self.base = base
        self.calls: list[dict[str, Any]] = []

    def request(self, method, url, headers=None, json=None, params=None, data=None, files=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "headers": headers or {}, "json": json, "params": params, "data": data, "files": files}
        )
        path = url[len(self.base):] if url.startswith(self.base) else url
        return self.routes.get((method, path), FakeResponse(404, {"message": "Not found"}))

    def get(self, url, params=None, headers=None, timeout=None):
        return self.request("GET", url, headers=headers, params=params, timeout=timeout)


def user_cookie(role: str = "Admin", employee_id: Optional[int] = 1) -> str:
    return json.dumps(
        {"id": 1, "firstname": "Ana", "lastname": "Cruz", "role_name": role, "employee_id": employee_id},
        separators=(",", ":"),
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def app(session, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from payroll_portal.main import _request_token

    container = build_container(api_base_url="http://api.test/api", session=session, token_provider=_request_token)
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "API_BASE_URL": "http://api.test/api"}, container=container)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    def _login(role: str = "Admin", employee_id: Optional[int] = 1, token: str = "tok-123"):
        client.set_cookie("auth_token", token)
        client.set_cookie("user", user_cookie(role, employee_id))
        return client

    return _login
