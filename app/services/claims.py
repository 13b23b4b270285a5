"""Claim-listing applications: account creation, listing ownership and admin review."""

import logging
import re
import time

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.errors import Conflict, NotFound, ValidationError
from app.models import ListingClaim, Manager, User
from app.models.base import utcnow
from app.models.listing_claim import CLAIM_APPROVED, CLAIM_PENDING, CLAIM_REJECTED
from app.models.user import ROLE_MANAGER
from app.schemas.auth import Principal
from app.schemas.managers import ClaimSubmission
from app.services.accounts import create_user, validate_password

logger = logging.getLogger(__name__)

REVIEW_STATUSES = (CLAIM_APPROVED, CLAIM_REJECTED)
ALREADY_CLAIMED_MESSAGE = "This listing has already been claimed"

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """'Acme Holiday Homes!' -> 'acme-holiday-homes'."""
    return _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")


def claim_listing(db: Session, manager_id: int, principal: Principal) -> Manager:
    """Mark an unclaimed listing as owned by principal."""
    manager = db.get(Manager, manager_id)
    if manager is None:
        raise NotFound("Manager not found")
    if manager.is_claimed:
        raise Conflict(ALREADY_CLAIMED_MESSAGE)
    manager.is_claimed = True
    manager.claimed_by = principal.id
    db.commit()
    logger.info("Listing claimed", extra={"manager_id": manager_id, "user_id": principal.id})
    return manager


def _require_fields(submission: ClaimSubmission) -> None:
    required = (
        submission.company_name,
        submission.website,
        submission.full_name,
        submission.email,
        submission.phone,
        submission.password,
    )
    if any(not value or not value.strip() for value in required):
        raise ValidationError("Required fields missing")


def submit_claim(db: Session, submission: ClaimSubmission, settings: Settings) -> tuple[ListingClaim, User]:
    """
    Create a manager account and attach it to a listing in one transaction.

    With manager_id the existing listing is claimed; without it a new,
    already-claimed listing is created from the company name. The stored
    ListingClaim is left pending for admin review.
    """
    _require_fields(submission)
    validate_password(submission.password, settings)

    manager: Manager | None = None
    if submission.manager_id is not None:
        manager = db.get(Manager, submission.manager_id)
        if manager is None:
            raise NotFound("Manager not found")
        if manager.is_claimed:
            raise Conflict(ALREADY_CLAIMED_MESSAGE)
    else:
        slug = slugify(submission.company_name)
        if not slug:
            raise ValidationError("Company name must contain letters or digits")
        if db.execute(select(Manager.id).where(Manager.slug == slug)).first() is not None:
            raise Conflict("A listing with this company name already exists")

    try:
        user = create_user(
            db,
            email=submission.email.strip(),
            password=submission.password,
            name=submission.full_name.strip(),
            role=ROLE_MANAGER,
            settings=settings,
            conflict_message="An account with this email already exists",
        )
        if manager is None:
            company = submission.company_name.strip()
            manager = Manager(
                name=company,
                slug=slugify(company),
                description=f"{company} is a property management company in Dubai.",
                website=submission.website,
                founded_year=submission.year_founded,
                is_claimed=True,
                claimed_by=user.id,
                is_active=True,
            )
            db.add(manager)
        else:
            manager.is_claimed = True
            manager.claimed_by = user.id
        db.flush()

        claim = ListingClaim(
            id=f"claim_{int(time.time() * 1000)}_{user.id}",
            user_id=user.id,
            manager_id=manager.id,
            company_name=submission.company_name.strip(),
            website=submission.website,
            year_founded=submission.year_founded,
            team_size=submission.team_size,
            full_name=submission.full_name.strip(),
            job_title=submission.job_title,
            email=submission.email.strip(),
            phone=submission.phone,
            how_did_you_hear=submission.how_did_you_hear,
            message=submission.message,
            status=CLAIM_PENDING,
        )
        db.add(claim)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(
        "Claim submitted",
        extra={"claim_id": claim.id, "manager_id": manager.id, "user_id": user.id},
    )
    return claim, user


def list_pending_claims(db: Session) -> list[ListingClaim]:
    stmt = (
        select(ListingClaim)
        .where(ListingClaim.status == CLAIM_PENDING)
        .order_by(ListingClaim.created_at, ListingClaim.id)
    )
    return list(db.execute(stmt).scalars())


def review_claim(
    db: Session,
    claim_id: str,
    status: str,
    notes: str | None,
    reviewer: Principal,
) -> ListingClaim:
    if status not in REVIEW_STATUSES:
        raise ValidationError("Invalid status")
    claim = db.get(ListingClaim, claim_id)
    if claim is None:
        raise NotFound("Claim not found")
    claim.status = status
    claim.notes = notes
    claim.reviewed_by = reviewer.id
    claim.reviewed_at = utcnow()
    db.commit()
    logger.info("Claim reviewed", extra={"claim_id": claim_id, "claim_status": status})
    return claim
