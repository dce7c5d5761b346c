"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tweeble.core.exceptions import Unauthenticated
from tweeble.core.security import decode_access_token
from tweeble.core.settings import settings
from tweeble.db.session import get_db
from tweeble.models import User

# Bearer tokens are optional; anonymous viewers may read feeds.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def _token_from_request(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.auth_cookie_name)


def get_optional_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> User | None:
    """Return the viewer identified by the bearer token or session cookie.

    Invalid, expired or dangling tokens are treated as anonymous.
    """
    token = _token_from_request(request, credentials)
    if not token:
        return None
    subject = decode_access_token(token)
    if subject is None:
        return None
    return db.get(User, subject)


def get_current_user(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> User:
    """Return the authenticated viewer.

    Raises:
        Unauthenticated: If the request carries no valid identity.
    """
    if user is None:
        raise Unauthenticated("Could not validate credentials")
    return user


def get_viewer_id(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> str | None:
    """Return the viewer's id, or ``None`` for anonymous requests."""
    return user.id if user is not None else None


# Type aliases for viewer dependencies
CurrentUserDep = Annotated[User, Depends(get_current_user)]
ViewerIdDep = Annotated[str | None, Depends(get_viewer_id)]
