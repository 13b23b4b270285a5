"""SQLite connection handle and per-request session management."""

import logging
from collections.abc import Generator
from pathlib import Path

from fastapi import Request
from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.errors import Conflict, InternalError

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the engine and session factory for the single SQLite database file.

    Constructed by the application factory and opened/closed by its lifespan,
    so handlers only ever see sessions handed out by get_db.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: Engine | None = None
        self._sessionmaker: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    @property
    def in_memory(self) -> bool:
        database = make_url(self.url).database
        return not database or database == ":memory:"

    def open(self) -> None:
        """Create the engine; creates the parent directory of a file database."""
        if self._engine is not None:
            return
        kwargs: dict = {"connect_args": {"check_same_thread": False}, "echo": self.echo}
        if self.in_memory:
            # One shared connection, otherwise every session sees an empty database.
            kwargs["poolclass"] = StaticPool
        else:
            Path(make_url(self.url).database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(self.url, **kwargs)
        event.listen(engine, "connect", self._configure_connection)
        self._engine = engine
        self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        logger.info("Database opened: %s", engine.url.render_as_string(hide_password=True))

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Database closed")

    def session(self) -> Session:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not open")
        return self._sessionmaker()

    def _configure_connection(self, dbapi_connection, _record) -> None:
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
            if not self.in_memory:
                cursor.execute("PRAGMA journal_mode=WAL")
        finally:
            cursor.close()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.warning("Database connectivity check failed", exc_info=True)
        return False


def commit_or_conflict(db: Session, message: str) -> None:
    """
    Commit; a uniqueness violation that slipped past the explicit checks becomes Conflict.

    A storage failure (locked or unwritable database file) becomes InternalError.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Commit rejected by constraint: %s", e.orig)
        raise Conflict(message) from e
    except OperationalError as e:
        db.rollback()
        raise InternalError(f"Commit failed: {e.orig}") from e
