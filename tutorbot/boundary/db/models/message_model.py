"""
Message ORM model.

Dependencies: sqlalchemy, tutorbot.boundary.db.base
System role: Chat message persistence
"""

from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tutorbot.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class MessageModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Message ORM model. Immutable once created; removed only with its conversation.

    Attributes:
        id: UUID primary key (auto-generated)
        conversation_id: Owning conversation (cascade delete)
        is_user: True for student messages, False for tutor replies
        content: Message text
        tools_used: Tool names reported for a tutor reply
        question_context: Annotation for hint requests (the question being worked on)
    """

    __tablename__ = "messages"

    conversation_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    is_user: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    tools_used: Mapped[list | None] = mapped_column(JSON, nullable=True, default=None)

    question_context: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    # Relationships
    conversation = relationship("ConversationModel", back_populates="messages")
