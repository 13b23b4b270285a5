"""Authorization predicates: role membership and listing ownership, kept independent."""

from collections.abc import Collection
from typing import Any

from app.core.errors import Forbidden, Unauthorized
from app.models.user import ROLE_ADMIN, ROLE_MANAGER
from app.schemas.auth import Principal

ADMIN_ONLY = frozenset({ROLE_ADMIN})
MANAGER_OR_ADMIN = frozenset({ROLE_MANAGER, ROLE_ADMIN})


def has_role(principal: Principal | None, allowed_roles: Collection[str]) -> bool:
    return principal is not None and principal.role in allowed_roles


def check_role(
    principal: Principal | None,
    allowed_roles: Collection[str],
    message: str = "Insufficient role",
) -> Principal:
    """Return principal if its role is allowed; Unauthorized when absent, Forbidden otherwise."""
    if principal is None:
        raise Unauthorized("Authentication required")
    if principal.role not in allowed_roles:
        raise Forbidden(message)
    return principal


def is_owner(principal: Principal | None, resource: Any) -> bool:
    """True when resource.claimed_by is the principal's user id."""
    if principal is None:
        return False
    owner_id = getattr(resource, "claimed_by", None)
    return owner_id is not None and owner_id == principal.id


def can_edit_listing(principal: Principal | None, listing: Any) -> bool:
    return has_role(principal, ADMIN_ONLY) or is_owner(principal, listing)
