"""User accounts: credential checks, creation, password changes and deletion."""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.errors import Conflict, NotFound, Unauthorized, ValidationError
from app.core.security import hash_password, verify_password
from app.models import Manager, User
from app.schemas.auth import Principal

logger = logging.getLogger(__name__)


def principal_for(user: User) -> Principal:
    return Principal(id=user.id, email=user.email, role=user.role, name=user.name)


def validate_password(password: str | None, settings: Settings) -> str:
    if not password or len(password) < settings.PASSWORD_MIN_LEN:
        raise ValidationError(
            f"Password must be at least {settings.PASSWORD_MIN_LEN} characters"
        )
    return password


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


def email_taken(db: Session, email: str, exclude_user_id: int | None = None) -> bool:
    stmt = select(User.id).where(User.email == email)
    if exclude_user_id is not None:
        stmt = stmt.where(User.id != exclude_user_id)
    return db.execute(stmt).first() is not None


def create_user(
    db: Session,
    *,
    email: str,
    password: str,
    name: str,
    role: str,
    settings: Settings,
    conflict_message: str = "Email already exists",
) -> User:
    """Add a user after validating the password and email uniqueness. Flushes; caller commits."""
    validate_password(password, settings)
    if email_taken(db, email):
        raise Conflict(conflict_message)
    user = User(
        email=email,
        password_hash=hash_password(password, settings.BCRYPT_ROUNDS),
        role=role,
        name=name,
    )
    db.add(user)
    db.flush()
    logger.info("User created", extra={"user_id": user.id, "role": role})
    return user


def authenticate_credentials(db: Session, email: str, password: str) -> User:
    """Return the user for email/password or raise Unauthorized without saying which part failed."""
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed")
        raise Unauthorized("Invalid credentials")
    return user


def change_password(
    db: Session,
    user_id: int,
    current_password: str,
    new_password: str,
    settings: Settings,
) -> None:
    user = db.get(User, user_id)
    if user is None or not verify_password(current_password, user.password_hash):
        raise Unauthorized("Current password is incorrect")
    validate_password(new_password, settings)
    user.password_hash = hash_password(new_password, settings.BCRYPT_ROUNDS)
    user.updated_at = func.now()
    db.commit()
    logger.info("Password changed", extra={"user_id": user_id})


def delete_user(db: Session, user_id: int, acting: Principal) -> None:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    if user_id == acting.id:
        raise ValidationError("Cannot delete your own account")
    try:
        # Listings owned by the account become claimable again.
        released = db.execute(
            update(Manager)
            .where(Manager.claimed_by == user_id)
            .values(is_claimed=False, claimed_by=None, updated_at=func.now()),
            execution_options={"synchronize_session": False},
        ).rowcount
        db.delete(user)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(
        "User deleted",
        extra={"user_id": user_id, "deleted_by": acting.id, "listings_released": released},
    )
