"""ORM model for claim-listing applications awaiting admin review."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from app.models.base import Base

CLAIM_PENDING = "pending"
CLAIM_APPROVED = "approved"
CLAIM_REJECTED = "rejected"


class ListingClaim(Base):
    """
    Application submitted through the public claim form.

    The user account and listing ownership are granted at submission time;
    the admin review only records the decision.
    """

    __tablename__ = "listing_claims"

    id = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    manager_id = Column(Integer, ForeignKey("managers.id", ondelete="SET NULL"), nullable=True)
    company_name = Column(String(255), nullable=False)
    website = Column(String(1024), nullable=False)
    year_founded = Column(Integer, nullable=True)
    team_size = Column(String(64), nullable=True)
    full_name = Column(String(255), nullable=False)
    job_title = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=False)
    how_did_you_hear = Column(String(255), nullable=True)
    message = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=CLAIM_PENDING, index=True)
    notes = Column(Text, nullable=True)
    reviewed_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    reviewed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
