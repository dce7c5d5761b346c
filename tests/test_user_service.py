"""Tests for registration and credential checks."""

import pytest

from tweeble.core.exceptions import Unauthenticated, ValidationError
from tweeble.schemas.user import RegisterRequest
from tweeble.services.user_service import authenticate, password_problems, register_user


def _payload(**overrides) -> RegisterRequest:
    data = {
        "email": "carol@example.com",
        "username": "Carol",
        "password": "Sup3r$ecret",
        "confirm_password": "Sup3r$ecret",
        "description": "hi",
    }
    data.update(overrides)
    return RegisterRequest(**data)


def test_register_stores_hashed_password(db_session) -> None:
    user = register_user(db_session, _payload())

    assert user.id
    assert user.username == "Carol"
    assert user.password_hash != "Sup3r$ecret"
    assert user.created_at is not None


def test_register_rejects_taken_username_and_email(db_session, test_user) -> None:
    with pytest.raises(ValidationError) as excinfo:
        register_user(db_session, _payload(username="ALICE", email="Alice@Example.com"))

    assert set(excinfo.value.errors) == {"username", "email"}


def test_register_reports_every_password_problem(db_session) -> None:
    with pytest.raises(ValidationError) as excinfo:
        register_user(db_session, _payload(password="short", confirm_password="other"))

    errors = excinfo.value.errors
    assert errors["confirm_password"] == ["Passwords do not match."]
    assert len(errors["password"]) == 4


def test_password_policy() -> None:
    assert password_problems("Passw0rd!") == []
    assert password_problems("password") != []


def test_authenticate_by_username_or_email(db_session, test_user, test_password) -> None:
    assert authenticate(db_session, "alice", test_password).id == test_user.id
    assert authenticate(db_session, "ALICE@example.com", test_password).id == test_user.id


@pytest.mark.parametrize("identifier,password", [("Alice", "wrong"), ("ghost", "Passw0rd!")])
def test_authenticate_failures(db_session, test_user, identifier, password) -> None:
    with pytest.raises(Unauthenticated, match="Invalid login attempt."):
        authenticate(db_session, identifier, password)
