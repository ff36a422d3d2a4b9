# backend/tests/test_access.py

import os

import pytest
from fastapi.testclient import TestClient

from notifier.auth import access
from notifier.auth.ratelimit import reset_limiter
from notifier.auth.tokens import issue_token
from notifier.main import create_app


@pytest.mark.parametrize(
    "host",
    ["127.0.0.1", "127.0.0.2", "::1", "::ffff:127.0.0.1"],
)
def test_loopback_addresses(host: str) -> None:
    assert access.is_loopback(host)


@pytest.mark.parametrize(
    "host",
    ["10.0.0.5", "192.168.1.127", "::ffff:10.0.0.1", "2001:db8::1", "testclient", "", None],
)
def test_remote_or_unknown_addresses(host) -> None:
    assert not access.is_loopback(host)


def _remote_client(monkeypatch, ip: str = "203.0.113.7") -> TestClient:
    monkeypatch.setattr(access, "get_client_ip", lambda request: ip)
    reset_limiter()
    return TestClient(create_app())


@pytest.mark.parametrize(
    "method,path,kwargs",
    [
        ("post", "/login", {"json": {"username": "test-user", "password": "test-pass"}}),
        ("post", "/login", {"content": b"{not json", "headers": {"Content-Type": "application/json"}}),
        ("post", "/notifier", {"json": {"receiver": "a@b.com", "title": "T", "message": "m"}}),
        ("post", "/notifier", {}),
        ("get", "/health", {}),
        ("get", "/does-not-exist", {}),
    ],
)
def test_remote_requests_are_denied_everywhere(monkeypatch, method, path, kwargs) -> None:
    client = _remote_client(monkeypatch)

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 403
    assert response.json() == {"msg": "❌ Only localhost allowed"}


def test_remote_denied_even_with_valid_token(monkeypatch) -> None:
    client = _remote_client(monkeypatch)
    token = issue_token(os.environ["SECRET_KEY"])

    response = client.post(
        "/notifier",
        json={"receiver": "a@b.com", "title": "T", "message": "m"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 403
    assert response.json()["msg"] == "❌ Only localhost allowed"


def test_default_test_client_address_is_treated_as_remote() -> None:
    reset_limiter()
    client = TestClient(create_app())

    response = client.get("/health")

    assert response.status_code == 403


def test_blocked_request_is_logged(monkeypatch, caplog) -> None:
    client = _remote_client(monkeypatch, ip="198.51.100.1")

    with caplog.at_level("WARNING", logger="notifier"):
        client.get("/health")

    assert any("Blocked remote IP: 198.51.100.1" in r.getMessage() for r in caplog.records)


def test_loopback_health_check(monkeypatch) -> None:
    client = _remote_client(monkeypatch, ip="127.0.0.1")

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_middleware_uses_fastapi_response_types() -> None:
    import fastapi

    assert access.Request is fastapi.Request
    assert access.Response is fastapi.Response
