"""Editable About page and the public contact form."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.api.deps import require_admin
from app.core.database import get_db
from app.core.errors import ValidationError
from app.models import ContactSubmission, PageContent
from app.models.base import utcnow
from app.schemas.auth import Principal
from app.schemas.common import MessageResponse
from app.schemas.content import AboutContent, AboutUpdate, ContactRequest, ContactSubmissionOut
from app.seed.data import DEFAULT_ABOUT

logger = logging.getLogger(__name__)
router = APIRouter()

ABOUT_PAGE_KEY = "about"


def _get_page(db: Session, page_key: str) -> PageContent | None:
    return db.execute(
        select(PageContent).where(PageContent.page_key == page_key)
    ).scalar_one_or_none()


@router.get("/about", response_model=AboutContent)
def get_about(db: Annotated[Session, Depends(get_db)]) -> AboutContent:
    """Saved About page, or the built-in copy until an admin saves one."""
    page = _get_page(db, ABOUT_PAGE_KEY)
    if page is None:
        return AboutContent(**DEFAULT_ABOUT, updated_at=utcnow())
    return AboutContent.model_validate(page)


@router.put("/about", response_model=MessageResponse)
def update_about(
    body: AboutUpdate,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Replace the About page copy (creates the row on first save)."""
    page = _get_page(db, ABOUT_PAGE_KEY)
    if page is None:
        page = PageContent(page_key=ABOUT_PAGE_KEY)
        db.add(page)
    page.title = body.title
    page.subtitle = body.subtitle
    page.mission = body.mission
    page.story = body.story
    page.values_text = body.values
    page.stats = body.stats or {}
    page.updated_at = func.now()
    db.commit()
    return MessageResponse(message="About page updated successfully")


@router.post("/contact", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def submit_contact(
    body: ContactRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    required = (body.name, body.email, body.subject, body.message)
    if any(not value or not value.strip() for value in required):
        raise ValidationError("All fields are required")
    db.add(
        ContactSubmission(
            name=body.name.strip(),
            email=body.email.strip(),
            subject=body.subject.strip(),
            message=body.message,
            inquiry_type=body.inquiry_type or "general",
        )
    )
    db.commit()
    logger.info("Contact form submitted", extra={"inquiry_type": body.inquiry_type or "general"})
    return MessageResponse(message="Message sent successfully")


@router.get("/contact/submissions", response_model=list[ContactSubmissionOut])
def list_contact_submissions(
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[ContactSubmission]:
    stmt = select(ContactSubmission).order_by(
        ContactSubmission.created_at.desc(), ContactSubmission.id.desc()
    )
    return list(db.execute(stmt).scalars())
