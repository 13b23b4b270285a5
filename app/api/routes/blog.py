"""Blog posts: published listing and reading, admin authoring."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.deps import require_admin
from app.core.database import commit_or_conflict, get_db
from app.core.errors import Conflict, NotFound
from app.models import BlogPost
from app.models.base import utcnow
from app.schemas.auth import Principal
from app.schemas.blog import BlogPostCreate, BlogPostOut, BlogPostUpdate
from app.schemas.common import CreatedResponse, MessageResponse
from app.services.query_builder import SelectFilter, apply_update, collect_updates

router = APIRouter()

BLOG_FIELDS = (
    "title",
    "slug",
    "excerpt",
    "content",
    "featured_image",
    "category",
    "tags",
    "is_published",
)


def _slug_taken(db: Session, slug: str, exclude_id: int | None = None) -> bool:
    stmt = select(BlogPost.id).where(BlogPost.slug == slug)
    if exclude_id is not None:
        stmt = stmt.where(BlogPost.id != exclude_id)
    return db.execute(stmt).first() is not None


@router.get("", response_model=list[BlogPostOut])
def list_posts(
    db: Annotated[Session, Depends(get_db)],
    category: str | None = None,
    search: str | None = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[BlogPost]:
    """Published posts, newest first."""
    filters = (
        SelectFilter()
        .flag(BlogPost.is_published, True)
        .equals(BlogPost.category, category)
        .search((BlogPost.title, BlogPost.excerpt, BlogPost.content), search)
    )
    stmt = (
        filters.apply(select(BlogPost))
        .order_by(BlogPost.published_at.desc(), BlogPost.id.desc())
        .limit(limit)
        .offset(offset)
    )
    return list(db.execute(stmt).scalars())


@router.get("/categories/list", response_model=list[str])
def list_categories(db: Annotated[Session, Depends(get_db)]) -> list[str]:
    stmt = (
        select(BlogPost.category)
        .where(BlogPost.is_published.is_(True), BlogPost.category.is_not(None))
        .distinct()
        .order_by(BlogPost.category)
    )
    return list(db.execute(stmt).scalars())


@router.get("/{slug}", response_model=BlogPostOut)
def get_post(
    slug: str,
    db: Annotated[Session, Depends(get_db)],
) -> BlogPost:
    post = db.execute(
        select(BlogPost).where(BlogPost.slug == slug, BlogPost.is_published.is_(True))
    ).scalar_one_or_none()
    if post is None:
        raise NotFound("Blog post not found")
    return post


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    body: BlogPostCreate,
    admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    if _slug_taken(db, body.slug):
        raise Conflict("Slug already exists")
    post = BlogPost(
        **body.model_dump(),
        author_id=admin.id,
        published_at=utcnow() if body.is_published else None,
    )
    db.add(post)
    commit_or_conflict(db, "Slug already exists")
    return CreatedResponse(id=post.id, message="Blog post created successfully")


@router.put("/{post_id}", response_model=MessageResponse)
def update_post(
    post_id: int,
    body: BlogPostUpdate,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Partial update; publishing a post that was never published stamps published_at."""
    post = db.get(BlogPost, post_id)
    if post is None:
        raise NotFound("Blog post not found")
    assignments = collect_updates(body.sent_fields(), BLOG_FIELDS)
    if "slug" in assignments and _slug_taken(db, assignments["slug"], exclude_id=post_id):
        raise Conflict("Slug already exists")
    if assignments.get("is_published") and post.published_at is None:
        assignments["published_at"] = utcnow()
    apply_update(db, BlogPost, post_id, assignments)
    commit_or_conflict(db, "Slug already exists")
    return MessageResponse(message="Blog post updated successfully")


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    _admin: Annotated[Principal, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    post = db.get(BlogPost, post_id)
    if post is None:
        raise NotFound("Blog post not found")
    db.delete(post)
    db.commit()
    return MessageResponse(message="Blog post deleted successfully")
