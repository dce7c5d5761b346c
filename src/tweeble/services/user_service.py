"""Account registration and credential checks."""
from __future__ import annotations

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from tweeble.core import security
from tweeble.core.exceptions import Unauthenticated, ValidationError
from tweeble.core.settings import settings
from tweeble.db.time import utcnow
from tweeble.models.user import User
from tweeble.schemas.user import RegisterRequest

logger = logging.getLogger(__name__)

__all__ = [
    "authenticate",
    "password_problems",
    "register_user",
]

INVALID_LOGIN_MESSAGE = "Invalid login attempt."


def password_problems(password: str) -> list[str]:
    """Return the password policy rules ``password`` breaks."""
    problems: list[str] = []
    if len(password) < settings.password_min_length:
        problems.append(
            f"Passwords must be at least {settings.password_min_length} characters."
        )
    if not any(ch.isdigit() for ch in password):
        problems.append("Passwords must have at least one digit ('0'-'9').")
    if not any(ch.islower() for ch in password):
        problems.append("Passwords must have at least one lowercase ('a'-'z').")
    if not any(ch.isupper() for ch in password):
        problems.append("Passwords must have at least one uppercase ('A'-'Z').")
    if all(ch.isalnum() for ch in password):
        problems.append("Passwords must have at least one non alphanumeric character.")
    return problems


def register_user(db: Session, payload: RegisterRequest) -> User:
    """Create an account after checking uniqueness and the password policy.

    Raises:
        ValidationError: With field-level messages for every broken rule.
    """
    errors: dict[str, list[str]] = {}

    if payload.password != payload.confirm_password:
        errors.setdefault("confirm_password", []).append("Passwords do not match.")
    problems = password_problems(payload.password)
    if problems:
        errors.setdefault("password", []).extend(problems)

    if db.execute(
        select(User.id).where(func.lower(User.username) == payload.username.lower())
    ).first():
        errors.setdefault("username", []).append(
            f"Username '{payload.username}' is already taken."
        )
    if db.execute(
        select(User.id).where(func.lower(User.email) == payload.email.lower())
    ).first():
        errors.setdefault("email", []).append(f"Email '{payload.email}' is already taken.")

    if errors:
        raise ValidationError("Registration failed", errors=errors)

    user = User(
        username=payload.username,
        email=payload.email,
        password_hash=security.hash_password(payload.password),
        description=payload.description,
        created_at=utcnow(),
    )
    db.add(user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.username, user.id)
    return user


def authenticate(db: Session, identifier: str, password: str) -> User:
    """Return the user matching ``identifier`` (email or username) and password.

    The email is tried first, then the username, both case-insensitively.

    Raises:
        Unauthenticated: If no account matches or the password is wrong.
    """
    lowered = identifier.strip().lower()
    candidates = db.execute(
        select(User).where(
            or_(func.lower(User.email) == lowered, func.lower(User.username) == lowered)
        )
    ).scalars().all()
    user = next(
        (u for u in candidates if u.email.lower() == lowered),
        candidates[0] if candidates else None,
    )

    if user is None or not security.verify_password(password, user.password_hash):
        logger.warning("Failed login for %r", identifier)
        raise Unauthenticated(INVALID_LOGIN_MESSAGE)
    return user
