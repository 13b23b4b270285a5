"""API routes mounted under API_PREFIX."""

from fastapi import APIRouter

from app.api.routes import admin, auth, blog, content, health, locations, managers

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(managers.router, prefix="/managers", tags=["managers"])
router.include_router(locations.router, prefix="/locations", tags=["locations"])
router.include_router(blog.router, prefix="/blog", tags=["blog"])
router.include_router(content.router, prefix="/content", tags=["content"])
