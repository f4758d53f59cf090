"""
Conversation ORM model.

Represents a chat thread between one user and the tutor, optionally scoped
to a module.

Dependencies: sqlalchemy, tutorbot.boundary.db.base
System role: Conversation persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tutorbot.boundary.db.base import Base, TimestampMixin, UUIDMixin, utcnow

DEFAULT_CONVERSATION_TITLE = "New conversation"


class ConversationModel(Base, UUIDMixin, TimestampMixin):
    """
    Conversation ORM model.

    A null module_id marks a "general" conversation. The title is rewritten
    once by a summarisation call after the first exchange.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        module_id: Optional module reference (SET NULL when the module is deleted)
        title: Display title
        last_activity: Timestamp of the latest message, used for ordering

    Relationships:
        messages: One-to-many with MessageModel (cascade delete)
    """

    __tablename__ = "conversations"

    user_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)

    module_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("modules.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=DEFAULT_CONVERSATION_TITLE,
    )

    last_activity: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    # Relationships
    messages = relationship(
        "MessageModel",
        back_populates="conversation",
        cascade="all, delete-orphan",
        order_by="MessageModel.created_at",
    )
