"""ORM model for property-manager listings."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from app.models.base import Base, JSONText


class Manager(Base):
    """
    A property-management company listed in the directory.

    rating and review_count are derived from the reviews table and rewritten
    whenever a review is added or removed. claimed_by is the user who owns
    the listing after a claim.
    """

    __tablename__ = "managers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=True, index=True)
    address = Column(String(1024), nullable=True)
    phone = Column(String(64), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(1024), nullable=True)
    logo_url = Column(String(1024), nullable=True)
    cover_image_url = Column(String(1024), nullable=True)
    founded_year = Column(Integer, nullable=True)
    listings_count = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    services = Column(JSONText, nullable=True)
    social_links = Column(JSONText, nullable=True)
    team_members = Column(JSONText, nullable=True)
    tier = Column(String(255), nullable=True)
    is_claimed = Column(Boolean, nullable=False, default=False)
    claimed_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    location = relationship("Location", lazy="joined")

    @property
    def location_name(self) -> str | None:
        return self.location.name if self.location is not None else None

    @property
    def location_slug(self) -> str | None:
        return self.location.slug if self.location is not None else None
