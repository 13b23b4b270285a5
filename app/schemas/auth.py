"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Principal(BaseModel):
    """Authenticated identity carried in the token (id, email, role, name)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: Literal["admin", "manager"]
    name: str


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class RegisterRequest(BaseModel):
    """Self-registration of a manager account."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)


class AuthResponse(BaseModel):
    """JWT plus the principal it encodes, returned after login or registration."""

    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: Principal


class MeResponse(BaseModel):
    user: Principal


class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(..., alias="currentPassword", min_length=1, max_length=128)
    new_password: str = Field(..., alias="newPassword", min_length=1, max_length=128)


class ForgotPasswordRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=255)


class ForgotPasswordResponse(BaseModel):
    message: str
    # Only populated outside prod; there is no email delivery.
    token: str | None = None


class VerifyResetTokenResponse(BaseModel):
    valid: bool


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, max_length=128)
    password: str = Field(..., min_length=1, max_length=128)
