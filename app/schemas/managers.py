"""Schemas for manager listings, reviews and claim applications."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.common import JSONDict, JSONList, OptionalInt, PartialUpdate


class ReviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    manager_id: int
    user_name: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None


class ManagerOut(BaseModel):
    """Listing as shown in search results, with its location's name and slug."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: str | None = None
    location_id: int | None = None
    location_name: str | None = None
    location_slug: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    logo_url: str | None = None
    cover_image_url: str | None = None
    founded_year: int | None = None
    listings_count: int = 0
    rating: float = 0
    review_count: int = 0
    services: JSONList = Field(default_factory=list)
    social_links: JSONDict = Field(default_factory=dict)
    team_members: JSONList = Field(default_factory=list)
    tier: str | None = None
    is_claimed: bool = False
    claimed_by: int | None = None
    is_featured: bool = False
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ManagerDetail(ManagerOut):
    reviews: list[ReviewOut] = Field(default_factory=list)


class ManagerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str | None = None
    location_id: int | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    founded_year: OptionalInt = None
    services: list[str] = Field(default_factory=list)
    is_featured: bool = False


class ManagerUpdate(PartialUpdate):
    """
    Every column a client may try to change on a listing.

    Which of these are actually applied depends on the caller; see
    LISTING_FIELDS and ADMIN_LISTING_FIELDS in the managers routes.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "slug", "is_featured", "is_active"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    logo_url: str | None = None
    cover_image_url: str | None = None
    services: list[str] | None = None
    location_id: int | None = None
    founded_year: OptionalInt = None
    is_featured: bool | None = None
    is_active: bool | None = None
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class ReviewCreate(BaseModel):
    # Checked by the ratings service so the client gets one combined message.
    user_name: str | None = None
    rating: int | None = None
    comment: str | None = None


class ClaimSubmission(BaseModel):
    """Public claim-listing form; managerId is absent when listing a new company."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    manager_id: OptionalInt = None
    company_name: str | None = None
    website: str | None = None
    year_founded: OptionalInt = None
    team_size: str | None = None
    full_name: str | None = None
    job_title: str | None = None
    email: str | None = None
    phone: str | None = None
    password: str | None = None
    how_did_you_hear: str | None = None
    message: str | None = None


class ClaimOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    user_id: int | None = None
    manager_id: int | None = None
    company_name: str
    website: str
    year_founded: int | None = None
    team_size: str | None = None
    full_name: str
    job_title: str | None = None
    email: str
    phone: str
    how_did_you_hear: str | None = None
    message: str | None = None
    status: str
    notes: str | None = None
    reviewed_by: int | None = None
    reviewed_at: datetime | None = None
    created_at: datetime | None = None


class ClaimUser(BaseModel):
    id: int
    email: str
    name: str
    role: str


class ClaimSubmitResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    claim_id: str
    user: ClaimUser


class ClaimReviewRequest(BaseModel):
    status: str
    notes: str | None = None


class ClaimReviewResponse(BaseModel):
    message: str
    claim: ClaimOut
