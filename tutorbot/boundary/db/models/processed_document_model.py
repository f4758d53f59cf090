"""
Processed document ORM model.

Standalone record of an uploaded document's extracted text, keyed to a
module through course_id. Written alongside module_content by the upload
flow; the content aggregator merges both tables.

Dependencies: sqlalchemy, tutorbot.boundary.db.base
System role: Course material persistence (secondary content table)
"""

from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tutorbot.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ProcessedDocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Processed document ORM model.

    Attributes:
        course_id: Owning module (cascade delete)
        user_id: Uploading user
        original_filename: Uploaded file name
        processed_text: Extracted text
        title / description: Generated metadata
        llm_whisperer_id: External id assigned by the OCR service
        document_metadata: Free-form metadata (column "metadata")
        is_approved: Admin approval flag
    """

    __tablename__ = "processed_documents"

    course_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("modules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)

    original_filename: Mapped[str] = mapped_column(String(255), nullable=False)

    processed_text: Mapped[str] = mapped_column(Text, nullable=False, default="")

    title: Mapped[str | None] = mapped_column(String(255), nullable=True)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    llm_whisperer_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    document_metadata: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True)

    is_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    module = relationship("ModuleModel", back_populates="processed_documents")
