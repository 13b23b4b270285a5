"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, func

from app.models.base import Base

ROLE_ADMIN = "admin"
ROLE_MANAGER = "manager"
ROLES = (ROLE_ADMIN, ROLE_MANAGER)


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'manager'
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('admin', 'manager')", name="ck_users_role"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_MANAGER)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())
