"""Tests for role checks and listing ownership."""

import unittest
from types import SimpleNamespace

from app.core.errors import Forbidden, Unauthorized
from app.schemas.auth import Principal
from app.services.authorization import (
    ADMIN_ONLY,
    MANAGER_OR_ADMIN,
    can_edit_listing,
    check_role,
    has_role,
    is_owner,
)

ADMIN = Principal(id=1, email="admin@bnbinsights.com", role="admin", name="Administrator")
MANAGER = Principal(id=2, email="owner@example.com", role="manager", name="Owner")


class TestRoleChecks(unittest.TestCase):
    def test_missing_principal_is_unauthorized(self) -> None:
        with self.assertRaises(Unauthorized):
            check_role(None, ADMIN_ONLY)

    def test_wrong_role_is_forbidden_with_message(self) -> None:
        with self.assertRaises(Forbidden) as ctx:
            check_role(MANAGER, ADMIN_ONLY, "Admin access required")
        self.assertEqual(ctx.exception.message, "Admin access required")

    def test_allowed_role_returns_principal(self) -> None:
        self.assertIs(check_role(MANAGER, MANAGER_OR_ADMIN), MANAGER)

    def test_widening_allowed_roles_never_revokes_access(self) -> None:
        """Anyone admitted by a narrower role set is admitted by a wider one."""
        sets = [frozenset(), ADMIN_ONLY, MANAGER_OR_ADMIN]
        for principal in (ADMIN, MANAGER):
            for narrow, wide in zip(sets, sets[1:]):
                if has_role(principal, narrow):
                    self.assertTrue(has_role(principal, wide))
        self.assertFalse(has_role(None, MANAGER_OR_ADMIN))


class TestListingOwnership(unittest.TestCase):
    def test_owner_is_claimant(self) -> None:
        listing = SimpleNamespace(claimed_by=MANAGER.id)
        self.assertTrue(is_owner(MANAGER, listing))
        self.assertFalse(is_owner(ADMIN, listing))

    def test_unclaimed_listing_has_no_owner(self) -> None:
        self.assertFalse(is_owner(MANAGER, SimpleNamespace(claimed_by=None)))
        self.assertFalse(is_owner(None, SimpleNamespace(claimed_by=None)))

    def test_admin_or_owner_may_edit(self) -> None:
        mine = SimpleNamespace(claimed_by=MANAGER.id)
        theirs = SimpleNamespace(claimed_by=99)
        self.assertTrue(can_edit_listing(MANAGER, mine))
        self.assertFalse(can_edit_listing(MANAGER, theirs))
        self.assertTrue(can_edit_listing(ADMIN, theirs))
        self.assertFalse(can_edit_listing(None, mine))


if __name__ == "__main__":
    unittest.main()
