# 📄 File: agroscan/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user accounts are stored in the database: names, email,
# the scrambled password, the role and when the account was created or changed.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the users table with a unique email constraint and an
# owning relationship to inspections that relies on database-level cascade delete.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - agroscan.shared.config.database (declarative base)
# - agroscan.modules.user_management.domain.models (UserRole)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - auth_service.py and user_service.py (entity construction)
# - migrations (schema generation)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: Account, credentials and role for a farmer or admin

Deleting a user removes their inspections through the foreign key's
ON DELETE CASCADE; the ORM does not load them first.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship

from agroscan.modules.user_management.domain.models.user import UserRole
from agroscan.shared.config.database import DatabaseBase


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(DatabaseBase):
    """
    SQLAlchemy model for user accounts.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="User identifier")

    first_name = Column(String(100), nullable=False, comment="Given name")
    last_name = Column(String(100), nullable=False, comment="Family name")
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Login email address"
    )
    password_hash = Column(String(255), nullable=False, comment="Hashed password using bcrypt")
    role = Column(
        Enum(
            UserRole,
            name="user_role",
            native_enum=False,
            length=20,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=UserRole.FARMER,
        comment="Farmer or Admin"
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, comment="Creation time (UTC)")
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, comment="Last update time (UTC)")

    # Relationships
    inspections = relationship(
        "InspectionModel",
        back_populates="user",
        cascade="all",
        passive_deletes=True,
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"
