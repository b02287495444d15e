from __future__ import annotations

import pytest
import requests

from conftest import FakeResponse, FakeSession
from payroll_portal.api.client import ApiClient
from payroll_portal.core.exceptions import ApiError, NotFoundError


def _client(routes, token=None):
    session = FakeSession(routes)
    return ApiClient("http://api.test/api/", token_provider=lambda: token, session=session), session


def test_attaches_bearer_token_from_provider():
    client, session = _client({("GET", "/employees"): FakeResponse(200, [])}, token="abc")

    assert client.get("/employees") == []
    assert session.calls[0]["url"] == "http://api.test/api/employees"
    assert session.calls[0]["headers"]["Authorization"] == "Bearer abc"


def test_explicit_token_wins_over_provider():
    client, session = _client({("GET", "/users"): FakeResponse(200, [])}, token="from-cookie")

    client.get("/users", token="explicit")

    assert session.calls[0]["headers"]["Authorization"] == "Bearer explicit"


def test_unauthenticated_call_sends_no_token():
    client, session = _client({("POST", "/login"): FakeResponse(200, {"access_token": "t"})}, token="abc")

    client.post("/login", json={"email": "a@b.c"}, authenticated=False)

    assert "Authorization" not in session.calls[0]["headers"]


def test_no_content_returns_none():
    client, _ = _client({("DELETE", "/users/3"): FakeResponse(204)})

    assert client.delete("/users/3") is None


@pytest.mark.parametrize(
    "status, message",
    [
        (401, "Unauthorized: Invalid or missing token."),
        (403, "Forbidden: You lack permission to access this resource."),
        (422, "The email has already been taken."),
        (500, "HTTP error! Status: 500"),
    ],
)
def test_error_messages(status, message):
    body = {"message": "The email has already been taken."} if status == 422 else {}
    client, _ = _client({("POST", "/users"): FakeResponse(status, body)})

    with pytest.raises(ApiError) as exc:
        client.post("/users", json={})

    assert str(exc.value) == message
    assert exc.value.status == status


def test_404_becomes_not_found():
    client, _ = _client({})

    with pytest.raises(NotFoundError) as exc:
        client.get("/employees/99")

    assert exc.value.status == 404
    assert str(exc.value) == "Not found"


def test_network_failure_is_api_error():
    class Broken(FakeSession):
        def request(self, *args, **kwargs):
            raise requests.ConnectionError("refused")

    client = ApiClient("http://api.test/api", session=Broken())

    with pytest.raises(ApiError) as exc:
        client.get("/employees")

    assert exc.value.status == 0
