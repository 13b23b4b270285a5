"""Tests for review submission and the derived rating on managers."""

import unittest

from app.core.database import Database
from app.core.errors import Forbidden, NotFound, ValidationError
from app.models import Base, Manager, Review
from app.schemas.auth import Principal
from app.services.ratings import add_review, remove_review, round_rating, validate_review


class TestRoundRating(unittest.TestCase):
    def test_no_reviews_is_zero(self) -> None:
        self.assertEqual(round_rating(None), 0.0)

    def test_rounds_to_one_decimal(self) -> None:
        self.assertEqual(round_rating(4.0), 4.0)
        self.assertEqual(round_rating(14 / 3), 4.7)
        self.assertEqual(round_rating(13 / 3), 4.3)

    def test_halves_round_up(self) -> None:
        self.assertEqual(round_rating(4.25), 4.3)
        self.assertEqual(round_rating(3.75), 3.8)


class TestValidateReview(unittest.TestCase):
    def test_requires_name_and_rating_in_range(self) -> None:
        for name, rating in (("", 4), ("   ", 4), (None, 4), ("Sam", None), ("Sam", 0), ("Sam", 6)):
            with self.subTest(name=name, rating=rating):
                with self.assertRaises(ValidationError) as ctx:
                    validate_review(name, rating)
                self.assertEqual(ctx.exception.message, "Name and rating (1-5) required")

    def test_accepts_bounds(self) -> None:
        validate_review("Sam", 1)
        validate_review("Sam", 5)


class TestRatingAggregation(unittest.TestCase):
    def setUp(self) -> None:
        self.database = Database("sqlite://")
        self.database.open()
        self.addCleanup(self.database.close)
        Base.metadata.create_all(bind=self.database.engine)
        self.db = self.database.session()
        self.addCleanup(self.db.close)
        manager = Manager(name="Acme Homes", slug="acme-homes", claimed_by=None)
        self.db.add(manager)
        self.db.commit()
        self.manager_id = manager.id

    def manager(self) -> Manager:
        self.db.expire_all()
        return self.db.get(Manager, self.manager_id)

    def test_mean_and_count_follow_reviews(self) -> None:
        for rating in (5, 3, 4):
            add_review(self.db, self.manager_id, "Guest", rating, "Stayed in March")
        manager = self.manager()
        self.assertEqual(manager.rating, 4.0)
        self.assertEqual(manager.review_count, 3)

    def test_uneven_mean_is_rounded(self) -> None:
        for rating in (5, 5, 4):
            add_review(self.db, self.manager_id, "Guest", rating)
        self.assertEqual(self.manager().rating, 4.7)

    def test_invalid_review_writes_nothing(self) -> None:
        with self.assertRaises(ValidationError):
            add_review(self.db, self.manager_id, "Guest", 9)
        self.assertEqual(self.db.query(Review).count(), 0)
        self.assertEqual(self.manager().review_count, 0)

    def test_unknown_manager(self) -> None:
        with self.assertRaises(NotFound):
            add_review(self.db, 4242, "Guest", 4)

    def test_removing_reviews_recomputes(self) -> None:
        admin = Principal(id=1, email="a@example.com", role="admin", name="A")
        first = add_review(self.db, self.manager_id, "Guest", 5)
        add_review(self.db, self.manager_id, "Guest", 2)
        remove_review(self.db, first.id, admin)
        manager = self.manager()
        self.assertEqual((manager.rating, manager.review_count), (2.0, 1))

    def test_removing_last_review_resets_to_zero(self) -> None:
        admin = Principal(id=1, email="a@example.com", role="admin", name="A")
        review = add_review(self.db, self.manager_id, "Guest", 5)
        remove_review(self.db, review.id, admin)
        manager = self.manager()
        self.assertEqual((manager.rating, manager.review_count), (0.0, 0))

    def test_stranger_cannot_remove_review(self) -> None:
        stranger = Principal(id=55, email="s@example.com", role="manager", name="S")
        review = add_review(self.db, self.manager_id, "Guest", 5)
        with self.assertRaises(Forbidden):
            remove_review(self.db, review.id, stranger)


if __name__ == "__main__":
    unittest.main()
