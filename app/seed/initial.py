"""Create tables and insert reference data; every step is insert-if-absent."""

import logging
from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.database import Database
from app.core.security import hash_password
from app.models import Base, BlogPost, Location, Manager, User
from app.models.base import utcnow
from app.models.user import ROLE_ADMIN
from app.seed.data import BLOG_POSTS, COVER_IMAGES, DEFAULT_SERVICES, LOCATIONS, MANAGERS

logger = logging.getLogger(__name__)


def _existing_slugs(db: Session, model: type) -> set[str]:
    return set(db.execute(select(model.slug)).scalars())


def seed_admin(db: Session, settings: Settings) -> bool:
    email = settings.SEED_ADMIN_EMAIL
    if db.execute(select(User.id).where(User.email == email)).first() is not None:
        return False
    db.add(
        User(
            email=email,
            password_hash=hash_password(
                settings.SEED_ADMIN_PASSWORD.get_secret_value(), settings.BCRYPT_ROUNDS
            ),
            role=ROLE_ADMIN,
            name="Administrator",
        )
    )
    logger.info("Default admin created: %s", email)
    if settings.is_production and settings.SEED_ADMIN_PASSWORD.get_secret_value() == "admin123":
        logger.warning("Seed admin uses the default password; change it immediately.")
    return True


def seed_locations(db: Session) -> int:
    existing = _existing_slugs(db, Location)
    added = 0
    for name, slug, properties, rate, occupancy, image, featured in LOCATIONS:
        if slug in existing:
            continue
        db.add(
            Location(
                name=name,
                slug=slug,
                properties_count=properties,
                avg_daily_rate=rate,
                occupancy_rate=occupancy,
                image_url=image,
                is_featured=featured,
            )
        )
        added += 1
    db.flush()
    return added


def seed_managers(db: Session) -> int:
    existing = _existing_slugs(db, Manager)
    location_ids = dict(db.execute(select(Location.slug, Location.id)).all())
    added = 0
    for name, slug, listings, tier, featured, rating, reviews, founded, location_slug in MANAGERS:
        if slug in existing:
            continue
        compact = slug.replace("-", "")
        website = f"https://{compact}.com"
        db.add(
            Manager(
                name=name,
                slug=slug,
                location_id=location_ids.get(location_slug),
                founded_year=founded,
                listings_count=listings,
                rating=rating,
                review_count=reviews,
                is_featured=featured,
                tier=tier,
                website=website,
                cover_image_url=f"/manager_{COVER_IMAGES.get(location_slug, 'downtown')}.jpg",
                description=(
                    f"{name} is a {tier} holiday home management company in Dubai with "
                    f"{listings}+ properties under management. They provide comprehensive "
                    "short-term rental services including listing optimization, guest "
                    "communication, cleaning, and maintenance."
                ),
                services=list(DEFAULT_SERVICES),
                social_links={
                    "website": website,
                    "airbnb": f"https://airbnb.com/users/{slug}",
                    "instagram": f"@{compact}",
                    "linkedin": slug,
                },
                team_members=[{"name": "Manager", "role": "Property Manager"}],
            )
        )
        added += 1
    return added


def seed_blog_posts(db: Session) -> int:
    existing = _existing_slugs(db, BlogPost)
    now = utcnow()
    added = 0
    for title, slug, excerpt, content, image, category, age_days in BLOG_POSTS:
        if slug in existing:
            continue
        db.add(
            BlogPost(
                title=title,
                slug=slug,
                excerpt=excerpt,
                content=content,
                featured_image=image,
                category=category,
                tags=[],
                is_published=True,
                published_at=now - timedelta(days=age_days),
            )
        )
        added += 1
    return added


def init_database(database: Database, settings: Settings) -> None:
    """Create missing tables, then insert seed rows that are not already present."""
    Base.metadata.create_all(bind=database.engine)
    if not settings.SEED_ON_STARTUP:
        logger.info("Database ready (seeding disabled).")
        return
    db = database.session()
    try:
        seed_admin(db, settings)
        locations = seed_locations(db)
        managers = seed_managers(db)
        posts = seed_blog_posts(db)
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
    logger.info(
        "Database ready",
        extra={"locations_added": locations, "managers_added": managers, "posts_added": posts},
    )
