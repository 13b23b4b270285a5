"""Tests for startup table creation and insert-if-absent seeding."""

import unittest

from sqlalchemy import func, select

from app.core.database import Database
from app.core.security import verify_password
from app.models import BlogPost, Location, Manager, User
from app.seed import init_database
from app.seed.data import BLOG_POSTS, LOCATIONS, MANAGERS

from api_support import ADMIN_EMAIL, ADMIN_PASSWORD, make_settings


class TestInitDatabase(unittest.TestCase):
    def setUp(self) -> None:
        self.database = Database("sqlite://")
        self.database.open()
        self.addCleanup(self.database.close)

    def count(self, model: type) -> int:
        with self.database.session() as db:
            return db.execute(select(func.count()).select_from(model)).scalar_one()

    def test_seeds_reference_data_once(self) -> None:
        settings = make_settings()
        init_database(self.database, settings)
        init_database(self.database, settings)
        self.assertEqual(self.count(Location), len(LOCATIONS))
        self.assertEqual(self.count(Manager), len(MANAGERS))
        self.assertEqual(self.count(BlogPost), len(BLOG_POSTS))
        self.assertEqual(self.count(User), 1)

    def test_admin_can_log_in_with_seed_password(self) -> None:
        init_database(self.database, make_settings())
        with self.database.session() as db:
            admin = db.execute(select(User).where(User.email == ADMIN_EMAIL)).scalar_one()
            self.assertEqual(admin.role, "admin")
            self.assertTrue(verify_password(ADMIN_PASSWORD, admin.password_hash))

    def test_managers_are_linked_to_their_locations(self) -> None:
        init_database(self.database, make_settings())
        with self.database.session() as db:
            manager = db.execute(select(Manager).where(Manager.slug == "frank-porter")).scalar_one()
            self.assertEqual(manager.location_slug, "downtown-dubai")
            self.assertEqual(manager.services[0], "Property Marketing")
            self.assertEqual(manager.social_links["linkedin"], "frank-porter")

    def test_existing_rows_are_left_alone(self) -> None:
        settings = make_settings()
        init_database(self.database, settings)
        with self.database.session() as db:
            db.execute(select(Location).where(Location.slug == "jbr")).scalar_one().name = "Jumeirah Beach"
            db.commit()
        init_database(self.database, settings)
        with self.database.session() as db:
            location = db.execute(select(Location).where(Location.slug == "jbr")).scalar_one()
            self.assertEqual(location.name, "Jumeirah Beach")

    def test_seeding_can_be_disabled(self) -> None:
        init_database(self.database, make_settings(SEED_ON_STARTUP=False))
        self.assertEqual(self.count(Manager), 0)
        self.assertEqual(self.count(User), 0)


if __name__ == "__main__":
    unittest.main()
