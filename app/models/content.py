"""ORM models for editable page content and contact form submissions."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.models.base import Base, JSONText


class PageContent(Base):
    """Editable copy for a static page, keyed by page_key (e.g. 'about')."""

    __tablename__ = "page_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    page_key = Column(String(64), nullable=False, unique=True, index=True)
    title = Column(String(512), nullable=True)
    subtitle = Column(String(1024), nullable=True)
    mission = Column(Text, nullable=True)
    story = Column(Text, nullable=True)
    values_text = Column(Text, nullable=True)
    stats = Column(JSONText, nullable=True)
    updated_at = Column(DateTime, nullable=False, server_default=func.now())


class ContactSubmission(Base):
    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(512), nullable=False)
    message = Column(Text, nullable=False)
    inquiry_type = Column(String(64), nullable=False, default="general")
    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
