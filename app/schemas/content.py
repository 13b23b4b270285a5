"""Schemas for editable page content and the contact form."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import JSONDict


class AboutContent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int | None = None
    title: str | None = None
    subtitle: str | None = None
    mission: str | None = None
    story: str | None = None
    values: str | None = Field(default=None, validation_alias="values_text")
    stats: JSONDict = Field(default_factory=dict)
    updated_at: datetime | None = None


class AboutUpdate(BaseModel):
    title: str | None = None
    subtitle: str | None = None
    mission: str | None = None
    story: str | None = None
    values: str | None = None
    stats: dict[str, int | float | str] | None = None


class ContactRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Checked in the route so a missing field reports "All fields are required".
    name: str | None = None
    email: str | None = None
    subject: str | None = None
    message: str | None = None
    inquiry_type: str | None = Field(default=None, alias="inquiryType")


class ContactSubmissionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    subject: str
    message: str
    inquiry_type: str
    created_at: datetime | None = None
