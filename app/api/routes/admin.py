"""Admin-only user management and dashboard statistics."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.api.deps import get_app_settings, require_admin
from app.core.config import Settings
from app.core.database import commit_or_conflict, get_db
from app.core.errors import Conflict, NotFound
from app.core.security import hash_password
from app.models import BlogPost, Location, Manager, User
from app.schemas.auth import Principal
from app.schemas.common import MessageResponse
from app.schemas.users import (
    StatsResponse,
    UserCreate,
    UserCreatedResponse,
    UserListItem,
    UserUpdate,
)
from app.services import accounts
from app.services.query_builder import apply_update, collect_updates

router = APIRouter()

USER_FIELDS = ("email", "name", "role", "password")


@router.get("/users", response_model=list[UserListItem])
def list_users(
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[User]:
    stmt = select(User).order_by(User.created_at.desc(), User.id.desc())
    return list(db.execute(stmt).scalars())


@router.get("/users/{user_id}", response_model=UserListItem)
def get_user(
    user_id: int,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


@router.post("/users", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> UserCreatedResponse:
    user = accounts.create_user(
        db,
        email=body.email,
        password=body.password,
        name=body.name,
        role=body.role,
        settings=settings,
    )
    commit_or_conflict(db, "Email already exists")
    return UserCreatedResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        message="User created successfully",
    )


@router.put("/users/{user_id}", response_model=MessageResponse)
def update_user(
    user_id: int,
    body: UserUpdate,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    """
    Partial update of email, name, role and password.

    Changing a user's role does not affect tokens already issued to them.
    """
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    sent = body.sent_fields()
    email = sent.get("email")
    if email and email != user.email and accounts.email_taken(db, email, exclude_user_id=user_id):
        raise Conflict("Email already exists")

    assignments = collect_updates(sent, USER_FIELDS)
    if "password" in assignments:
        password = accounts.validate_password(assignments.pop("password"), settings)
        assignments["password_hash"] = hash_password(password, settings.BCRYPT_ROUNDS)

    apply_update(db, User, user_id, assignments)
    commit_or_conflict(db, "Email already exists")
    return MessageResponse(message="User updated successfully")


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    accounts.delete_user(db, user_id, admin)
    return MessageResponse(message="User deleted successfully")


def _count(db: Session, model: type, *conditions) -> int:
    stmt = select(func.count()).select_from(model)
    if conditions:
        stmt = stmt.where(*conditions)
    return db.execute(stmt).scalar_one()


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> StatsResponse:
    """Dashboard counters; 'pending' managers are the inactive ones."""
    return StatsResponse(
        total_managers=_count(db, Manager),
        total_users=_count(db, User),
        total_locations=_count(db, Location),
        total_blog_posts=_count(db, BlogPost),
        pending_managers=_count(db, Manager, Manager.is_active.is_(False)),
        featured_managers=_count(db, Manager, Manager.is_featured.is_(True)),
        claimed_managers=_count(db, Manager, Manager.is_claimed.is_(True)),
    )
