"""Schemas for directory locations."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import PartialUpdate
from app.schemas.managers import ManagerOut


class LocationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    properties_count: int = 0
    avg_daily_rate: int = 0
    occupancy_rate: int = 0
    is_featured: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LocationDetail(LocationOut):
    managers: list[ManagerOut] = Field(default_factory=list)


class LocationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str | None = None
    image_url: str | None = None
    properties_count: int = Field(default=0, ge=0)
    avg_daily_rate: int = Field(default=0, ge=0)
    occupancy_rate: int = Field(default=0, ge=0, le=100)
    is_featured: bool = False


class LocationUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"name", "slug", "properties_count", "avg_daily_rate", "occupancy_rate", "is_featured"}
    )

    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str | None = None
    image_url: str | None = None
    properties_count: int | None = Field(default=None, ge=0)
    avg_daily_rate: int | None = Field(default=None, ge=0)
    occupancy_rate: int | None = Field(default=None, ge=0, le=100)
    is_featured: bool | None = None
