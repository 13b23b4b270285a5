"""Tests for whitelist-driven updates and optional SELECT filters."""

import unittest

from sqlalchemy import select

from app.core.database import Database
from app.core.errors import NoFieldsToUpdate
from app.models import Base, Location, Manager
from app.services.query_builder import SelectFilter, apply_update, collect_updates

WHITELIST = ("name", "description", "phone")


class TestCollectUpdates(unittest.TestCase):
    """Only whitelisted keys survive, in whitelist order."""

    def test_keys_outside_whitelist_are_dropped(self) -> None:
        payload = {"phone": "+971", "rating": 5, "claimed_by": 1, "name": "Acme"}
        assignments = collect_updates(payload, WHITELIST)
        self.assertEqual(list(assignments), ["name", "phone"])
        self.assertLessEqual(set(assignments), set(WHITELIST))

    def test_explicit_none_counts_as_present(self) -> None:
        self.assertEqual(collect_updates({"description": None}, WHITELIST), {"description": None})

    def test_nothing_whitelisted_raises(self) -> None:
        with self.assertRaises(NoFieldsToUpdate) as ctx:
            collect_updates({"is_featured": True}, WHITELIST)
        self.assertEqual(ctx.exception.message, "No fields to update")
        self.assertEqual(ctx.exception.status_code, 400)

    def test_empty_payload_raises(self) -> None:
        with self.assertRaises(NoFieldsToUpdate):
            collect_updates({}, WHITELIST)


class QueryBuilderDbTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.database = Database("sqlite://")
        self.database.open()
        self.addCleanup(self.database.close)
        Base.metadata.create_all(bind=self.database.engine)
        self.db = self.database.session()
        self.addCleanup(self.db.close)
        marina = Location(name="Dubai Marina", slug="dubai-marina")
        self.db.add(marina)
        self.db.flush()
        self.db.add_all(
            [
                Manager(name="Marina Stays", slug="marina-stays", location_id=marina.id, is_featured=True),
                Manager(name="100% Homes", slug="hundred-homes", description="Full_service"),
                Manager(name="Quiet Keys", slug="quiet-keys", description="Villas"),
            ]
        )
        self.db.commit()

    def slugs(self, filters: SelectFilter) -> list[str]:
        stmt = filters.apply(select(Manager.slug)).order_by(Manager.slug)
        return list(self.db.execute(stmt).scalars())


class TestApplyUpdate(QueryBuilderDbTestCase):
    def test_updates_row_and_reports_match(self) -> None:
        manager_id = self.db.execute(
            select(Manager.id).where(Manager.slug == "quiet-keys")
        ).scalar_one()
        matched = apply_update(self.db, Manager, manager_id, {"phone": "+971 4 000 0000"})
        self.db.commit()
        self.assertEqual(matched, 1)
        self.assertEqual(self.db.get(Manager, manager_id).phone, "+971 4 000 0000")

    def test_missing_row_matches_nothing(self) -> None:
        self.assertEqual(apply_update(self.db, Manager, 9999, {"phone": "x"}), 0)

    def test_empty_assignments_raise(self) -> None:
        with self.assertRaises(NoFieldsToUpdate):
            apply_update(self.db, Manager, 1, {})


class TestSelectFilter(QueryBuilderDbTestCase):
    def test_no_filters_returns_everything(self) -> None:
        self.assertEqual(self.slugs(SelectFilter()), ["hundred-homes", "marina-stays", "quiet-keys"])

    def test_blank_values_add_no_clause(self) -> None:
        filters = SelectFilter().equals(Manager.name, "").equals(Manager.name, None).search(
            (Manager.name,), ""
        )
        self.assertEqual(filters.clauses, [])

    def test_equals_and_flag(self) -> None:
        self.assertEqual(self.slugs(SelectFilter().flag(Manager.is_featured, True)), ["marina-stays"])
        self.assertEqual(
            self.slugs(SelectFilter().equals(Manager.name, "Quiet Keys")), ["quiet-keys"]
        )

    def test_search_matches_any_column(self) -> None:
        filters = SelectFilter().search((Manager.name, Manager.description), "villa")
        self.assertEqual(self.slugs(filters), ["quiet-keys"])

    def test_search_treats_wildcards_literally(self) -> None:
        self.assertEqual(
            self.slugs(SelectFilter().search((Manager.name,), "100%")), ["hundred-homes"]
        )
        self.assertEqual(
            self.slugs(SelectFilter().search((Manager.description,), "l_a")), []
        )
        self.assertEqual(
            self.slugs(SelectFilter().search((Manager.description,), "full_")), ["hundred-homes"]
        )


if __name__ == "__main__":
    unittest.main()
