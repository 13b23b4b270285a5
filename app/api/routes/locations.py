"""Directory locations (Dubai markets)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.api.deps import require_admin
from app.core.database import commit_or_conflict, get_db
from app.core.errors import Conflict, NotFound, ValidationError
from app.models import Location, Manager
from app.schemas.auth import Principal
from app.schemas.common import CreatedResponse, MessageResponse
from app.schemas.locations import LocationCreate, LocationDetail, LocationOut, LocationUpdate
from app.schemas.managers import ManagerOut
from app.services.query_builder import SelectFilter, apply_update, collect_updates

router = APIRouter()

LOCATION_FIELDS = (
    "name",
    "slug",
    "description",
    "image_url",
    "properties_count",
    "avg_daily_rate",
    "occupancy_rate",
    "is_featured",
)


def _slug_taken(db: Session, slug: str, exclude_id: int | None = None) -> bool:
    stmt = select(Location.id).where(Location.slug == slug)
    if exclude_id is not None:
        stmt = stmt.where(Location.id != exclude_id)
    return db.execute(stmt).first() is not None


@router.get("", response_model=list[LocationOut])
def list_locations(
    db: Annotated[Session, Depends(get_db)],
    featured: bool = False,
) -> list[Location]:
    stmt = SelectFilter().flag(Location.is_featured, featured).apply(select(Location))
    stmt = stmt.order_by(Location.is_featured.desc(), Location.name.asc())
    return list(db.execute(stmt).scalars())


@router.get("/{slug}", response_model=LocationDetail)
def get_location(
    slug: str,
    db: Annotated[Session, Depends(get_db)],
) -> LocationDetail:
    """Location by slug with its active managers, featured first then by rating."""
    location = db.execute(select(Location).where(Location.slug == slug)).scalar_one_or_none()
    if location is None:
        raise NotFound("Location not found")
    managers = db.execute(
        select(Manager)
        .where(Manager.location_id == location.id, Manager.is_active.is_(True))
        .order_by(Manager.is_featured.desc(), Manager.rating.desc())
    ).scalars()
    return LocationDetail(
        **LocationOut.model_validate(location).model_dump(),
        managers=[ManagerOut.model_validate(m) for m in managers],
    )


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    body: LocationCreate,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    if _slug_taken(db, body.slug):
        raise Conflict("Slug already exists")
    location = Location(**body.model_dump())
    db.add(location)
    commit_or_conflict(db, "Slug already exists")
    return CreatedResponse(id=location.id, message="Location created successfully")


@router.put("/{location_id}", response_model=MessageResponse)
def update_location(
    location_id: int,
    body: LocationUpdate,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    if db.get(Location, location_id) is None:
        raise NotFound("Location not found")
    assignments = collect_updates(body.sent_fields(), LOCATION_FIELDS)
    if "slug" in assignments and _slug_taken(db, assignments["slug"], exclude_id=location_id):
        raise Conflict("Slug already exists")
    apply_update(db, Location, location_id, assignments)
    commit_or_conflict(db, "Slug already exists")
    return MessageResponse(message="Location updated successfully")


@router.delete("/{location_id}", response_model=MessageResponse)
def delete_location(
    location_id: int,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    location = db.get(Location, location_id)
    if location is None:
        raise NotFound("Location not found")
    in_use = db.execute(
        select(func.count()).select_from(Manager).where(Manager.location_id == location_id)
    ).scalar_one()
    if in_use > 0:
        raise ValidationError("Cannot delete location with existing managers")
    db.delete(location)
    db.commit()
    return MessageResponse(message="Location deleted successfully")
