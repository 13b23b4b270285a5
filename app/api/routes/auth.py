"""Login, registration, password management and the admin user list under /auth."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.deps import authenticate, get_app_settings, require_admin
from app.core.config import Settings
from app.core.database import commit_or_conflict, get_db
from app.core.security import create_access_token
from app.models import User
from app.models.user import ROLE_MANAGER
from app.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    MeResponse,
    Principal,
    RegisterRequest,
    ResetPasswordRequest,
    VerifyResetTokenResponse,
)
from app.schemas.common import MessageResponse
from app.schemas.users import UserListItem
from app.services import accounts, password_reset

logger = logging.getLogger(__name__)
router = APIRouter()

FORGOT_PASSWORD_MESSAGE = "If an account exists, a reset link has been sent"


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthResponse:
    """
    Authenticate with email and password; returns a JWT and the user it identifies.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = accounts.authenticate_credentials(db, body.email, body.password)
    principal = accounts.principal_for(user)
    return AuthResponse(token=create_access_token(principal, settings), user=principal)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthResponse:
    """Self-service sign-up; new accounts always get the manager role."""
    user = accounts.create_user(
        db,
        email=body.email,
        password=body.password,
        name=body.name,
        role=ROLE_MANAGER,
        settings=settings,
        conflict_message="Email already registered",
    )
    commit_or_conflict(db, "Email already registered")
    principal = accounts.principal_for(user)
    return AuthResponse(token=create_access_token(principal, settings), user=principal)


@router.get("/me", response_model=MeResponse)
def me(principal: Annotated[Principal, Depends(authenticate)]) -> MeResponse:
    """Return the identity recorded in the token (not re-read from the database)."""
    return MeResponse(user=principal)


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    body: ChangePasswordRequest,
    principal: Annotated[Principal, Depends(authenticate)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    accounts.change_password(
        db, principal.id, body.current_password, body.new_password, settings
    )
    return MessageResponse(message="Password updated successfully")


@router.post(
    "/forgot-password",
    response_model=ForgotPasswordResponse,
    response_model_exclude_none=True,
)
def forgot_password(
    body: ForgotPasswordRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ForgotPasswordResponse:
    """
    Issue a one-hour reset token. The response is identical whether or not the
    account exists; outside prod the token itself is included for testing.
    """
    token = password_reset.issue_reset_token(db, body.email, settings)
    if token is None or settings.is_production:
        return ForgotPasswordResponse(message=FORGOT_PASSWORD_MESSAGE)
    return ForgotPasswordResponse(message=FORGOT_PASSWORD_MESSAGE, token=token)


@router.get("/verify-reset-token/{token}", response_model=VerifyResetTokenResponse)
def verify_reset_token(
    token: str,
    db: Annotated[Session, Depends(get_db)],
) -> VerifyResetTokenResponse:
    password_reset.get_valid_token(db, token)
    return VerifyResetTokenResponse(valid=True)


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(
    body: ResetPasswordRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    password_reset.reset_password(db, body.token, body.password, settings)
    return MessageResponse(message="Password reset successfully")


@router.get("/users", response_model=list[UserListItem])
def list_users(
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[User]:
    """List all users (admin only), newest first."""
    stmt = select(User).order_by(User.created_at.desc(), User.id.desc())
    return list(db.execute(stmt).scalars())


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    accounts.delete_user(db, user_id, admin)
    return MessageResponse(message="User deleted successfully")
