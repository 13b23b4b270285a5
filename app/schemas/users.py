"""Schemas for admin user management and dashboard stats."""

from datetime import datetime
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.common import PartialUpdate


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    role: str
    created_at: datetime | None = None


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    role: Literal["admin", "manager"]
    password: str = Field(..., min_length=1, max_length=128)


class UserCreatedResponse(BaseModel):
    id: int
    email: str
    name: str
    role: str
    message: str


class UserUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"email", "name", "role", "password"})

    email: str | None = Field(default=None, min_length=3, max_length=255)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    role: Literal["admin", "manager"] | None = None
    password: str | None = Field(default=None, min_length=1, max_length=128)


class StatsResponse(BaseModel):
    """Admin dashboard counters, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_managers: int
    total_users: int
    total_locations: int
    total_blog_posts: int
    pending_managers: int
    featured_managers: int
    claimed_managers: int
