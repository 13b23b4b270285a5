"""
Create a user (e.g. an extra admin) without going through the API. Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD NAME [role]
Example:
  python -m app.scripts.create_user ops@bnbinsights.com your-secure-password "Ops Team" admin
"""
import argparse
import sys

from dotenv import load_dotenv

from app.core.config import get_settings
from app.core.database import Database
from app.core.errors import ApiError
from app.core.logging import configure_logging
from app.models import Base
from app.models.user import ROLE_MANAGER, ROLES
from app.services.accounts import create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a BNBinsights user.")
    parser.add_argument("email", help="Login email (unique)")
    parser.add_argument("password", help="Plain password; stored as a bcrypt hash")
    parser.add_argument("name", help="Display name")
    parser.add_argument("role", nargs="?", default=ROLE_MANAGER, choices=sorted(ROLES))
    args = parser.parse_args(argv)

    email = args.email.strip()
    name = args.name.strip()
    if not email or not name:
        print("Email and name are required.", file=sys.stderr)
        return 1

    load_dotenv()
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    database = Database(settings.DATABASE_URL)
    database.open()
    Base.metadata.create_all(bind=database.engine)
    db = database.session()
    try:
        create_user(
            db,
            email=email,
            password=args.password,
            name=name,
            role=args.role,
            settings=settings,
            conflict_message=f"User '{email}' already exists.",
        )
        db.commit()
    except ApiError as e:
        db.rollback()
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
        database.close()
    print(f"Created user '{email}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
