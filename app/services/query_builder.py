"""
Whitelist-driven UPDATE assignments and optional-filter SELECT clauses.

Callers hand in whatever the client sent; only columns named in the
resource's whitelist can ever reach the generated statement.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from sqlalchemy import ColumnElement, Select, func, or_, update
from sqlalchemy.orm import Session

from app.core.errors import NoFieldsToUpdate

LIKE_ESCAPE = "\\"


def collect_updates(payload: Mapping[str, Any], allowed_fields: Sequence[str]) -> dict[str, Any]:
    """
    Return {field: value} for whitelisted fields present in payload, in whitelist order.

    A key that is present with value None counts as present (explicit null).
    Raises NoFieldsToUpdate when nothing whitelisted was supplied.
    """
    assignments: dict[str, Any] = {}
    for field in allowed_fields:
        if field in payload:
            assignments[field] = payload[field]
    if not assignments:
        raise NoFieldsToUpdate()
    return assignments


def apply_update(db: Session, model: type, row_id: int, assignments: Mapping[str, Any]) -> int:
    """
    Issue one parameterized UPDATE for row_id and stamp updated_at when the table has it.

    Returns the number of rows matched. Does not commit.
    """
    if not assignments:
        raise NoFieldsToUpdate()
    values = dict(assignments)
    if "updated_at" in model.__table__.columns:
        values["updated_at"] = func.now()
    result = db.execute(
        update(model).where(model.id == row_id).values(**values),
        execution_options={"synchronize_session": False},
    )
    return result.rowcount


def _escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class SelectFilter:
    """Accumulates WHERE clauses for optional query parameters; absent values add nothing."""

    def __init__(self) -> None:
        self.clauses: list[ColumnElement[bool]] = []

    def equals(self, column: Any, value: Any) -> "SelectFilter":
        if value is not None and value != "":
            self.clauses.append(column == value)
        return self

    def flag(self, column: Any, enabled: bool) -> "SelectFilter":
        if enabled:
            self.clauses.append(column.is_(True))
        return self

    def search(self, columns: Iterable[Any], term: str | None) -> "SelectFilter":
        """Substring match of term against any of columns."""
        if term:
            pattern = f"%{_escape_like(term)}%"
            self.clauses.append(or_(*(c.like(pattern, escape=LIKE_ESCAPE) for c in columns)))
        return self

    def apply(self, stmt: Select) -> Select:
        if not self.clauses:
            return stmt
        return stmt.where(*self.clauses)
