"""Tests for authentication endpoints."""

from fastapi import status

from tweeble.core.settings import settings

REGISTER_PAYLOAD = {
    "email": "dave@example.com",
    "username": "Dave",
    "password": "Sup3r$ecret",
    "confirm_password": "Sup3r$ecret",
    "description": "Just Dave",
}


def test_register_signs_in(client) -> None:
    response = client.post("/api/v1/auth/register", json=REGISTER_PAYLOAD)

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["username"] == "Dave"
    assert "password_hash" not in body["user"]
    assert settings.auth_cookie_name in response.cookies

    me = client.get("/api/v1/auth/me")
    assert me.status_code == status.HTTP_200_OK
    assert me.json()["email"] == "dave@example.com"


def test_register_duplicate_reports_field_errors(client, test_user) -> None:
    payload = {**REGISTER_PAYLOAD, "username": "alice"}
    response = client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "username" in response.json()["errors"]


def test_register_weak_password(client) -> None:
    payload = {**REGISTER_PAYLOAD, "password": "weak", "confirm_password": "weak"}
    response = client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"]["password"]


def test_register_malformed_username(client) -> None:
    payload = {**REGISTER_PAYLOAD, "username": "not valid!"}
    response = client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_register_invalid_email(client) -> None:
    payload = {**REGISTER_PAYLOAD, "email": "nope"}
    response = client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_login_with_username_and_email(client, test_user, test_password) -> None:
    for identifier in ("Alice", "alice@example.com"):
        response = client.post(
            "/api/v1/auth/login",
            json={"username_or_email": identifier, "password": test_password},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["id"] == test_user.id


def test_login_bad_password(client, test_user) -> None:
    response = client.post(
        "/api/v1/auth/login",
        json={"username_or_email": "Alice", "password": "nope"},
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Invalid login attempt."


def test_bearer_token_identifies_user(client, auth_token, test_user) -> None:
    response = client.get("/api/v1/auth/me", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["username"] == test_user.username


def test_me_requires_authentication(client) -> None:
    response = client.get("/api/v1/auth/me")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.headers["www-authenticate"] == "Bearer"


def test_logout_clears_cookie(client, test_user, test_password) -> None:
    client.post(
        "/api/v1/auth/login",
        json={"username_or_email": "Alice", "password": test_password},
    )
    assert client.get("/api/v1/auth/me").status_code == status.HTTP_200_OK

    response = client.post("/api/v1/auth/logout")
    assert response.status_code == status.HTTP_204_NO_CONTENT

    assert client.get("/api/v1/auth/me").status_code == status.HTTP_401_UNAUTHORIZED


def test_remember_me_sets_persistent_cookie(client, test_user, test_password) -> None:
    session_login = client.post(
        "/api/v1/auth/login",
        json={"username_or_email": "Alice", "password": test_password},
    )
    remembered = client.post(
        "/api/v1/auth/login",
        json={"username_or_email": "Alice", "password": test_password, "remember_me": True},
    )

    session_cookie = session_login.headers["set-cookie"].lower()
    persistent_cookie = remembered.headers["set-cookie"].lower()
    assert "max-age" not in session_cookie
    assert f"max-age={settings.access_token_expire_minutes * 60}" in persistent_cookie
    assert "httponly" in persistent_cookie
