"""Manager listings: public search, admin CRUD, owner edits, claims and reviews."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session, contains_eager

from app.api.deps import authenticate, get_app_settings, require_admin, require_manager
from app.core.config import Settings
from app.core.database import commit_or_conflict, get_db
from app.core.errors import Conflict, Forbidden, NotFound, ValidationError
from app.models import Location, Manager, Review
from app.schemas.auth import Principal
from app.schemas.common import CreatedResponse, MessageResponse
from app.schemas.managers import (
    ClaimOut,
    ClaimReviewRequest,
    ClaimReviewResponse,
    ClaimSubmission,
    ClaimSubmitResponse,
    ClaimUser,
    ManagerCreate,
    ManagerDetail,
    ManagerOut,
    ManagerUpdate,
    ReviewCreate,
    ReviewOut,
)
from app.services import claims, ratings
from app.services.authorization import ADMIN_ONLY, can_edit_listing, has_role
from app.services.query_builder import SelectFilter, apply_update, collect_updates

logger = logging.getLogger(__name__)
router = APIRouter()

# Fields an owner (or admin) may change on a listing, in the order they are applied.
LISTING_FIELDS = (
    "name",
    "description",
    "address",
    "phone",
    "email",
    "website",
    "logo_url",
    "cover_image_url",
    "services",
)
# Placement, visibility and identity fields are admin-only.
ADMIN_LISTING_FIELDS = LISTING_FIELDS + (
    "location_id",
    "founded_year",
    "is_featured",
    "is_active",
    "slug",
)


def _slug_taken(db: Session, slug: str, exclude_id: int | None = None) -> bool:
    stmt = select(Manager.id).where(Manager.slug == slug)
    if exclude_id is not None:
        stmt = stmt.where(Manager.id != exclude_id)
    return db.execute(stmt).first() is not None


def _require_location(db: Session, location_id: int | None) -> None:
    if location_id is not None and db.get(Location, location_id) is None:
        raise ValidationError("Location not found")


@router.get("", response_model=list[ManagerOut])
def list_managers(
    db: Annotated[Session, Depends(get_db)],
    location: str | None = None,
    featured: bool = False,
    search: str | None = None,
) -> list[Manager]:
    """
    Active listings, featured first then by rating.

    location filters by location slug; search matches listing name,
    description or location name.
    """
    stmt = (
        select(Manager)
        .outerjoin(Manager.location)
        .options(contains_eager(Manager.location))
        .where(Manager.is_active.is_(True))
    )
    filters = (
        SelectFilter()
        .equals(Location.slug, location)
        .flag(Manager.is_featured, featured)
        .search((Manager.name, Manager.description, Location.name), search)
    )
    stmt = filters.apply(stmt).order_by(Manager.is_featured.desc(), Manager.rating.desc())
    return list(db.execute(stmt).scalars())


@router.get("/claims/pending", response_model=list[ClaimOut])
def list_pending_claims(
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list:
    return claims.list_pending_claims(db)


@router.get("/{slug}", response_model=ManagerDetail)
def get_manager(
    slug: str,
    db: Annotated[Session, Depends(get_db)],
) -> ManagerDetail:
    """Active listing by slug with its reviews, newest first."""
    manager = db.execute(
        select(Manager).where(Manager.slug == slug, Manager.is_active.is_(True))
    ).scalar_one_or_none()
    if manager is None:
        raise NotFound("Manager not found")
    reviews = db.execute(
        select(Review)
        .where(Review.manager_id == manager.id)
        .order_by(Review.created_at.desc(), Review.id.desc())
    ).scalars()
    listing = ManagerOut.model_validate(manager)
    return ManagerDetail(
        **listing.model_dump(),
        reviews=[ReviewOut.model_validate(r) for r in reviews],
    )


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_manager(
    body: ManagerCreate,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    if _slug_taken(db, body.slug):
        raise Conflict("Slug already exists")
    _require_location(db, body.location_id)
    manager = Manager(**body.model_dump())
    db.add(manager)
    commit_or_conflict(db, "Slug already exists")
    logger.info("Manager created", extra={"manager_id": manager.id})
    return CreatedResponse(id=manager.id, message="Manager created successfully")


@router.put("/{manager_id}", response_model=MessageResponse)
def update_manager(
    manager_id: int,
    body: ManagerUpdate,
    principal: Annotated[Principal, Depends(authenticate)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """
    Update a listing. Admins and the owner who claimed it may edit; only
    admins may touch ADMIN_LISTING_FIELDS beyond LISTING_FIELDS. Keys outside
    the caller's whitelist are ignored.
    """
    manager = db.get(Manager, manager_id)
    if manager is None:
        raise NotFound("Manager not found")
    if not can_edit_listing(principal, manager):
        raise Forbidden("Not authorized to edit this manager")

    allowed = ADMIN_LISTING_FIELDS if has_role(principal, ADMIN_ONLY) else LISTING_FIELDS
    assignments = collect_updates(body.sent_fields(), allowed)
    if "slug" in assignments and _slug_taken(db, assignments["slug"], exclude_id=manager_id):
        raise Conflict("Slug already exists")
    if "location_id" in assignments:
        _require_location(db, assignments["location_id"])

    apply_update(db, Manager, manager_id, assignments)
    commit_or_conflict(db, "Slug already exists")
    return MessageResponse(message="Manager updated successfully")


@router.delete("/{manager_id}", response_model=MessageResponse)
def delete_manager(
    manager_id: int,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    manager = db.get(Manager, manager_id)
    if manager is None:
        raise NotFound("Manager not found")
    db.delete(manager)
    db.commit()
    return MessageResponse(message="Manager deleted successfully")


@router.post("/{manager_id}/claim", response_model=MessageResponse)
def claim_manager(
    manager_id: int,
    principal: Annotated[Principal, Depends(require_manager)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    claims.claim_listing(db, manager_id, principal)
    return MessageResponse(message="Listing claimed successfully")


@router.post(
    "/{manager_id}/reviews",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_review(
    manager_id: int,
    body: ReviewCreate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Public review submission; refreshes the listing's rating and review_count."""
    ratings.add_review(db, manager_id, body.user_name, body.rating, body.comment)
    return MessageResponse(message="Review added successfully")


@router.delete("/reviews/{review_id}", response_model=MessageResponse)
def delete_review(
    review_id: int,
    principal: Annotated[Principal, Depends(authenticate)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    ratings.remove_review(db, review_id, principal)
    return MessageResponse(message="Review deleted successfully")


@router.post("/claim", response_model=ClaimSubmitResponse, status_code=status.HTTP_201_CREATED)
def submit_claim(
    body: ClaimSubmission,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ClaimSubmitResponse:
    """Public claim form: creates the manager account and attaches it to a listing."""
    claim, user = claims.submit_claim(db, body, settings)
    return ClaimSubmitResponse(
        message="Claim submitted successfully",
        claim_id=claim.id,
        user=ClaimUser(id=user.id, email=user.email, name=user.name, role=user.role),
    )


@router.post("/claims/{claim_id}/review", response_model=ClaimReviewResponse)
def review_claim(
    claim_id: str,
    body: ClaimReviewRequest,
    admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> ClaimReviewResponse:
    claim = claims.review_claim(db, claim_id, body.status, body.notes, admin)
    return ClaimReviewResponse(
        message=f"Claim {claim.status}",
        claim=ClaimOut.model_validate(claim),
    )
