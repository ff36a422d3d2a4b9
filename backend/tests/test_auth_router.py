# backend/tests/test_auth_router.py

import logging

from fastapi.testclient import TestClient

from notifier.auth import access
from notifier.auth.ratelimit import reset_limiter
from notifier.auth.tokens import verify_token
from notifier.main import create_app

VALID = {"username": "test-user", "password": "test-pass"}


def create_test_client(monkeypatch) -> TestClient:
    """
    localhost からのアクセスとして扱う TestClient を作る。
    レートリミッタのカウンタはテストごとにリセットする。
    """
    monkeypatch.setenv("AUTH_USER", "test-user")
    monkeypatch.setenv("AUTH_PASS", "test-pass")
    monkeypatch.setenv("SECRET_KEY", "router-secret")
    monkeypatch.setattr(access, "get_client_ip", lambda request: "127.0.0.1")
    reset_limiter()
    return TestClient(create_app())


def test_login_success_returns_verifiable_token(monkeypatch) -> None:
    client = create_test_client(monkeypatch)

    response = client.post("/login", json=VALID)

    assert response.status_code == 200
    token = response.json()["token"]
    assert verify_token(token, "router-secret")["session"] is True


def test_login_missing_fields(monkeypatch) -> None:
    client = create_test_client(monkeypatch)

    for body in ({}, {"username": "test-user"}, {"password": "test-pass"}, {"username": "", "password": "x"}):
        response = client.post("/login", json=body)
        assert response.status_code == 400
        assert response.json() == {"msg": "❌ username and password required"}

    response = client.post("/login")
    assert response.status_code == 400


def test_login_invalid_credentials_do_not_reveal_field(monkeypatch, caplog) -> None:
    client = create_test_client(monkeypatch)

    with caplog.at_level(logging.WARNING, logger="notifier"):
        bad_user = client.post("/login", json={"username": "nope", "password": "test-pass"})
        bad_pass = client.post("/login", json={"username": "test-user", "password": "nope"})

    assert bad_user.status_code == bad_pass.status_code == 403
    assert bad_user.json() == bad_pass.json() == {"msg": "❌ Invalid credentials"}
    assert any("Failed login for user: nope" in r.getMessage() for r in caplog.records)


def test_login_rejected_when_credentials_not_configured(monkeypatch) -> None:
    client = create_test_client(monkeypatch)
    monkeypatch.delenv("AUTH_USER")
    monkeypatch.delenv("AUTH_PASS")

    response = client.post("/login", json=VALID)

    assert response.status_code == 403


def test_login_server_error_without_secret_key(monkeypatch, caplog) -> None:
    client = create_test_client(monkeypatch)
    monkeypatch.delenv("SECRET_KEY")

    with caplog.at_level(logging.ERROR, logger="notifier"):
        response = client.post("/login", json=VALID)

    assert response.status_code == 500
    assert response.json() == {"msg": "❌ Server error"}
    assert any("/login error" in r.getMessage() for r in caplog.records)


def test_login_malformed_json_is_client_error(monkeypatch) -> None:
    client = create_test_client(monkeypatch)

    response = client.post(
        "/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_login_rate_limit_applies_even_with_correct_credentials(monkeypatch) -> None:
    client = create_test_client(monkeypatch)

    statuses = [client.post("/login", json=VALID).status_code for _ in range(20)]
    assert statuses == [200] * 20

    response = client.post("/login", json=VALID)

    assert response.status_code == 429
    assert response.json() == {"msg": "❌ Too many login attempts. Try again later."}


def test_rate_limit_counts_failed_attempts_too(monkeypatch) -> None:
    client = create_test_client(monkeypatch)

    for _ in range(20):
        client.post("/login", json={"username": "x", "password": "y"})

    assert client.post("/login", json=VALID).status_code == 429
    assert client.post("/login", json={}).status_code == 429


def test_login_non_string_credentials_are_rejected(monkeypatch) -> None:
    client = create_test_client(monkeypatch)

    response = client.post("/login", json={"username": 123, "password": "x"})

    assert response.status_code == 403
    assert response.json() == {"msg": "❌ Invalid credentials"}


def test_rate_limit_counts_wrongly_typed_bodies(monkeypatch) -> None:
    client = create_test_client(monkeypatch)

    statuses = [
        client.post("/login", json={"username": 123, "password": "x"}).status_code
        for _ in range(20)
    ]
    assert 429 not in statuses

    response = client.post("/login", json=VALID)

    assert response.status_code == 429
    assert response.json() == {"msg": "❌ Too many login attempts. Try again later."}


def test_rate_limit_counts_non_object_bodies(monkeypatch) -> None:
    client = create_test_client(monkeypatch)

    for _ in range(20):
        assert client.post("/login", json=["test-user", "test-pass"]).status_code == 400

    assert client.post("/login", json=VALID).status_code == 429


def test_rate_limit_does_not_apply_to_notifier(monkeypatch) -> None:
    client = create_test_client(monkeypatch)
    for _ in range(21):
        client.post("/login", json=VALID)

    # トークン無しなので 401。429 にはならない
    response = client.post("/notifier", json={"title": "T"})
    assert response.status_code == 401
