"""Pydantic request/response schemas."""

from app.schemas.auth import AuthResponse, LoginRequest, MeResponse, Principal, RegisterRequest
from app.schemas.blog import BlogPostCreate, BlogPostOut, BlogPostUpdate
from app.schemas.common import CreatedResponse, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.locations import LocationCreate, LocationDetail, LocationOut, LocationUpdate
from app.schemas.managers import (
    ManagerCreate,
    ManagerDetail,
    ManagerOut,
    ManagerUpdate,
    ReviewCreate,
    ReviewOut,
)

__all__ = [
    "AuthResponse",
    "BlogPostCreate",
    "BlogPostOut",
    "BlogPostUpdate",
    "CreatedResponse",
    "HealthResponse",
    "LocationCreate",
    "LocationDetail",
    "LocationOut",
    "LocationUpdate",
    "LoginRequest",
    "ManagerCreate",
    "ManagerDetail",
    "ManagerOut",
    "ManagerUpdate",
    "MeResponse",
    "MessageResponse",
    "Principal",
    "RegisterRequest",
    "ReviewCreate",
    "ReviewOut",
]
