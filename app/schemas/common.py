"""Shared schema building blocks."""

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, Field, model_validator


def _none_to_empty_list(v: Any) -> Any:
    return [] if v is None else v


def _none_to_empty_dict(v: Any) -> Any:
    return {} if v is None else v


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


# JSON-text columns read back as None when empty; clients always get a container.
JSONList = Annotated[list[Any], BeforeValidator(_none_to_empty_list)]
JSONDict = Annotated[dict[str, Any], BeforeValidator(_none_to_empty_dict)]
OptionalInt = Annotated[int | None, BeforeValidator(_blank_to_none)]


class MessageResponse(BaseModel):
    message: str = Field(..., description="Human-readable outcome")


class CreatedResponse(BaseModel):
    id: int | str
    message: str


class PartialUpdate(BaseModel):
    """
    Base for partial-update bodies: only keys the client actually sent are applied.

    Columns listed in non_nullable may be omitted but not explicitly set to null.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> "PartialUpdate":
        for field in self.model_fields_set & self.non_nullable:
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def sent_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
