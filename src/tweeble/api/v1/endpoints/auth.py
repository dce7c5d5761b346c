# src/tweeble/api/v1/endpoints/auth.py
"""Authentication endpoints for the Tweeble API."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from tweeble.core.security import create_access_token
from tweeble.core.settings import settings
from tweeble.models import User
from tweeble.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from tweeble.services.user_service import authenticate, register_user

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/auth", tags=["authentication"])


def _sign_in(response: Response, user: User, *, persistent: bool) -> AuthResponse:
    """Issue a token for ``user`` and mirror it into the session cookie."""
    token = create_access_token(user.id)
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60 if persistent else None,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="lax",
    )
    return AuthResponse(
        access_token=token,
        token_type="bearer",
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/register",
    summary="Register a new account and sign in",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
)
async def register(
    payload: RegisterRequest,
    response: Response,
    db: SessionDep,
) -> AuthResponse:
    """Create an account; the new user is signed in immediately."""
    user = register_user(db, payload)
    return _sign_in(response, user, persistent=False)


@router.post(
    "/login",
    summary="Authenticate with username or email",
    response_model=AuthResponse,
)
async def login(
    payload: LoginRequest,
    response: Response,
    db: SessionDep,
) -> AuthResponse:
    """Authenticate and start a session."""
    user = authenticate(db, payload.username_or_email, payload.password)
    return _sign_in(response, user, persistent=payload.remember_me)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(current_user: CurrentUserDep) -> Response:
    """End the cookie session of the current user."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.auth_cookie_name)
    return response


@router.get("/me", response_model=UserResponse)
async def me(current_user: CurrentUserDep) -> User:
    """Return the authenticated user."""
    return current_user
