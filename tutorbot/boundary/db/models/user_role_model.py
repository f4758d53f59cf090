"""
User role ORM model.

Dependencies: sqlalchemy, tutorbot.boundary.db.base
System role: Admin gating for settings and module management
"""

import enum
from uuid import UUID

from sqlalchemy import Enum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tutorbot.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class UserRole(str, enum.Enum):
    """Application roles."""

    ADMIN = "admin"
    USER = "user"


class UserRoleModel(Base, UUIDMixin, CreatedAtMixin):
    """
    One role per user; users without a row are plain users.

    Attributes:
        user_id: User the role applies to (unique)
        role: UserRole
    """

    __tablename__ = "user_roles"

    user_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, unique=True)

    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.USER,
    )
