"""Request dependencies: settings, bearer-token authentication and role gates."""

from collections.abc import Callable
from typing import Annotated

import jwt
import pydantic
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings
from app.core.errors import Forbidden, Unauthorized
from app.core.security import decode_access_token
from app.models.user import ROLE_ADMIN, ROLE_MANAGER
from app.schemas.auth import Principal
from app.services.authorization import check_role

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def authenticate(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Principal:
    """
    Dependency: require a Bearer JWT and return the principal snapshot it carries.

    Missing token -> 401; bad signature, expiry or malformed claims -> 403.
    Identity comes from the token alone; the users table is not consulted.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Access token required")
    try:
        payload = decode_access_token(credentials.credentials, settings)
    except jwt.PyJWTError:
        raise Forbidden("Invalid or expired token")
    try:
        return Principal.model_validate(payload)
    except pydantic.ValidationError:
        raise Forbidden("Invalid or expired token")


def require_role(*allowed_roles: str, message: str) -> Callable[[Principal], Principal]:
    """Build a dependency that runs authenticate and then checks the role."""
    allowed = frozenset(allowed_roles)

    def dependency(principal: Annotated[Principal, Depends(authenticate)]) -> Principal:
        return check_role(principal, allowed, message)

    return dependency


require_admin = require_role(ROLE_ADMIN, message="Admin access required")
require_manager = require_role(ROLE_MANAGER, ROLE_ADMIN, message="Manager access required")
