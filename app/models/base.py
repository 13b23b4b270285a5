"""SQLAlchemy declarative Base and shared column types."""

import json
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Text
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class JSONText(TypeDecorator):
    """
    Stores a list or mapping as a flat JSON string in a TEXT column.

    NULL round-trips as None; callers decide what an absent value means.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> str | None:
        if value is None:
            return None
        return json.dumps(value)

    def process_result_value(self, value: str | None, dialect) -> Any:
        if not value:
            return None
        return json.loads(value)


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite stores datetimes without an offset."""
    return datetime.now(UTC).replace(tzinfo=None)
