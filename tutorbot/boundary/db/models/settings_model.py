"""
Settings ORM models.

system_settings holds admin-editable prompt configuration; global_settings
holds application-wide pointers such as the globally active module.

Dependencies: sqlalchemy, tutorbot.boundary.db.base
System role: Key/value settings persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tutorbot.boundary.db.base import Base, TimestampMixin, UUIDMixin, utcnow

SYSTEM_PROMPT_KEY = "ai_system_prompt"
ACTIVE_MODULE_KEY = "active_module_id"


class SystemSettingModel(Base, UUIDMixin):
    """
    Admin-editable key/value setting.

    Attributes:
        setting_key: Unique key (e.g. "ai_system_prompt")
        setting_value: Value; an empty value means "use the default"
        description: Human-readable description
        updated_by: Admin who last changed the value
        updated_at: Last modification timestamp
    """

    __tablename__ = "system_settings"

    setting_key: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)

    setting_value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    updated_by: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )


class GlobalSettingModel(Base, UUIDMixin, TimestampMixin):
    """
    Application-wide key/value pointer.

    Attributes:
        setting_key: Unique key (e.g. "active_module_id")
        setting_value: Value, nullable
        description: Human-readable description
    """

    __tablename__ = "global_settings"

    setting_key: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)

    setting_value: Mapped[str | None] = mapped_column(Text, nullable=True)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
