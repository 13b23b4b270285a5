"""Review submission/removal and the derived rating and review_count on managers."""

import logging
import math

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from app.core.errors import Forbidden, NotFound, ValidationError
from app.models import Manager, Review
from app.schemas.auth import Principal
from app.services.authorization import can_edit_listing

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def round_rating(value: float | None) -> float:
    """Round half up to one decimal place; no reviews means 0."""
    if value is None:
        return 0.0
    return math.floor(float(value) * 10 + 0.5) / 10


def validate_review(user_name: str | None, rating: int | None) -> None:
    if not user_name or not user_name.strip() or rating is None or not (
        MIN_RATING <= rating <= MAX_RATING
    ):
        raise ValidationError(f"Name and rating ({MIN_RATING}-{MAX_RATING}) required")


def refresh_manager_rating(db: Session, manager_id: int) -> tuple[float, int]:
    """Recompute mean rating and count from reviews and write both onto the manager row."""
    avg, count = db.execute(
        select(func.avg(Review.rating), func.count(Review.id)).where(
            Review.manager_id == manager_id
        )
    ).one()
    rating = round_rating(avg)
    db.execute(
        update(Manager)
        .where(Manager.id == manager_id)
        .values(rating=rating, review_count=count),
        execution_options={"synchronize_session": False},
    )
    return rating, count


def add_review(
    db: Session,
    manager_id: int,
    user_name: str | None,
    rating: int | None,
    comment: str | None = None,
) -> Review:
    """
    Insert a review and refresh the manager's aggregate in the same transaction.

    The INSERT takes SQLite's write lock before the aggregate is read, so a
    concurrent submission for the same manager waits and then sees this row.
    """
    validate_review(user_name, rating)
    manager = db.get(Manager, manager_id)
    if manager is None:
        raise NotFound("Manager not found")
    review = Review(
        manager_id=manager_id,
        user_name=user_name.strip(),
        rating=rating,
        comment=comment,
    )
    try:
        db.add(review)
        db.flush()
        new_rating, count = refresh_manager_rating(db, manager_id)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(
        "Review added",
        extra={"manager_id": manager_id, "rating": new_rating, "review_count": count},
    )
    return review


def remove_review(db: Session, review_id: int, principal: Principal) -> None:
    """Delete a review (admin or owner of the reviewed listing) and refresh the aggregate."""
    review = db.get(Review, review_id)
    if review is None:
        raise NotFound("Review not found")
    manager = db.get(Manager, review.manager_id)
    if not can_edit_listing(principal, manager):
        raise Forbidden("Not authorized to delete this review")
    manager_id = review.manager_id
    try:
        db.delete(review)
        db.flush()
        refresh_manager_rating(db, manager_id)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Review deleted", extra={"manager_id": manager_id, "review_id": review_id})
