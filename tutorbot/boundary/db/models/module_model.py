"""
Module ORM model.

Represents a course ("module"): a named collection of uploaded documents
plus metadata, optionally visible to every user.

Dependencies: sqlalchemy, tutorbot.boundary.db.base
System role: Module persistence for course organization
"""

from uuid import UUID

from sqlalchemy import JSON, Boolean, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tutorbot.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ModuleModel(Base, UUIDMixin, TimestampMixin):
    """
    Module ORM model.

    Global modules are visible to all users. Which module is globally
    *active* is not an attribute of the module; it lives in global_settings.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        name: Module name (255 char limit)
        code: Optional course code
        description: Optional description
        content_summary: Optional summary of the uploaded materials
        is_global: Visible to every user when True
        suggested_questions: Starter questions shown in the chat UI

    Relationships:
        contents: module_content rows (cascade delete)
        processed_documents: processed_documents rows (cascade delete)
    """

    __tablename__ = "modules"

    user_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Module name")

    code: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)

    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    content_summary: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    is_global: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    suggested_questions: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Suggested starter questions",
    )

    # Relationships
    contents = relationship(
        "ModuleContentModel",
        back_populates="module",
        cascade="all, delete-orphan",
    )
    processed_documents = relationship(
        "ProcessedDocumentModel",
        back_populates="module",
        cascade="all, delete-orphan",
    )
