"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.blog_post import BlogPost
from app.models.content import ContactSubmission, PageContent
from app.models.listing_claim import ListingClaim
from app.models.location import Location
from app.models.manager import Manager
from app.models.password_reset import PasswordResetToken
from app.models.review import Review
from app.models.user import User

__all__ = [
    "Base",
    "BlogPost",
    "ContactSubmission",
    "ListingClaim",
    "Location",
    "Manager",
    "PageContent",
    "PasswordResetToken",
    "Review",
    "User",
]
