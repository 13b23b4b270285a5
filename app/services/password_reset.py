"""Single-use password reset tokens (no email delivery; tokens are returned in dev)."""

import logging
import secrets
from datetime import timedelta

from sqlalchemy import delete, func
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.errors import ValidationError
from app.core.security import hash_password
from app.models import PasswordResetToken, User
from app.models.base import utcnow
from app.services.accounts import get_user_by_email, validate_password

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


def purge_expired_tokens(db: Session) -> int:
    result = db.execute(delete(PasswordResetToken).where(PasswordResetToken.expires_at < utcnow()))
    return result.rowcount


def issue_reset_token(db: Session, email: str, settings: Settings) -> str | None:
    """Create a reset token for email; returns None when no such account exists."""
    user = get_user_by_email(db, email)
    purge_expired_tokens(db)
    if user is None:
        db.commit()
        return None
    token = secrets.token_hex(32)
    db.add(
        PasswordResetToken(
            token=token,
            user_id=user.id,
            expires_at=utcnow() + timedelta(minutes=settings.RESET_TOKEN_EXPIRE_MINUTES),
        )
    )
    db.commit()
    logger.info("Password reset token issued", extra={"user_id": user.id})
    return token


def get_valid_token(db: Session, token: str) -> PasswordResetToken:
    row = db.get(PasswordResetToken, token)
    if row is None or row.expires_at <= utcnow():
        raise ValidationError(INVALID_TOKEN_MESSAGE)
    return row


def reset_password(db: Session, token: str, password: str, settings: Settings) -> None:
    """Set a new password from a valid token and consume the token."""
    validate_password(password, settings)
    row = get_valid_token(db, token)
    user = db.get(User, row.user_id)
    if user is None:
        raise ValidationError(INVALID_TOKEN_MESSAGE)
    user.password_hash = hash_password(password, settings.BCRYPT_ROUNDS)
    user.updated_at = func.now()
    db.delete(row)
    db.commit()
    logger.info("Password reset completed", extra={"user_id": user.id})
