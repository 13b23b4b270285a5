"""Tests for the Database handle and session helpers."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.database import Database, check_db_connected, commit_or_conflict
from app.core.errors import Conflict, InternalError


class TestDatabaseHandle(unittest.TestCase):
    def test_in_memory_detection(self) -> None:
        self.assertTrue(Database("sqlite://").in_memory)
        self.assertTrue(Database("sqlite:///:memory:").in_memory)
        self.assertFalse(Database("sqlite:///./data/app.db").in_memory)

    def test_sessions_require_open(self) -> None:
        database = Database("sqlite://")
        with self.assertRaises(RuntimeError):
            database.session()
        database.open()
        try:
            with database.session() as db:
                self.assertEqual(db.execute(text("PRAGMA foreign_keys")).scalar_one(), 1)
        finally:
            database.close()
        with self.assertRaises(RuntimeError):
            database.engine


class TestSessionHelpers(unittest.TestCase):
    def test_connectivity_check_reports_failure(self) -> None:
        session = MagicMock()
        session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("locked"))
        self.assertFalse(check_db_connected(session))

    def test_connectivity_check_reports_success(self) -> None:
        self.assertTrue(check_db_connected(MagicMock()))

    def test_integrity_error_becomes_conflict(self) -> None:
        session = MagicMock()
        session.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        with self.assertRaises(Conflict) as ctx:
            commit_or_conflict(session, "Slug already exists")
        self.assertEqual(ctx.exception.message, "Slug already exists")
        session.rollback.assert_called_once()

    def test_storage_failure_becomes_internal_error(self) -> None:
        session = MagicMock()
        session.commit.side_effect = OperationalError("COMMIT", {}, Exception("database is locked"))
        with self.assertRaises(InternalError) as ctx:
            commit_or_conflict(session, "Slug already exists")
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertIn("database is locked", ctx.exception.message)
        session.rollback.assert_called_once()

    def test_clean_commit(self) -> None:
        session = MagicMock()
        commit_or_conflict(session, "unused")
        session.commit.assert_called_once()
        session.rollback.assert_not_called()


if __name__ == "__main__":
    unittest.main()
