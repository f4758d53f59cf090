"""
Module content ORM model.

Extracted text of a document uploaded to a module, with its processing state.

Dependencies: sqlalchemy, tutorbot.boundary.db.base
System role: Course material persistence (authoritative content table)
"""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tutorbot.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ProcessingStatus(str, enum.Enum):
    """
    Module content processing lifecycle states.

    PENDING: Extracted text stored, cleaning not started
    PROCESSING: Cleaning / metadata generation in progress
    COMPLETED: processed_content ready for prompt context
    FAILED: Processing error (details in the logs)
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ModuleContentModel(Base, UUIDMixin, TimestampMixin):
    """
    Module content ORM model.

    Attributes:
        module_id: Owning module (cascade delete)
        user_id: Uploading user
        document_id: processed_documents.id of the same upload, when both were written
        file_name / file_type / file_size: Upload provenance
        extracted_text: Raw OCR output
        processed_content: Cleaned text used for prompt context
        summary / keywords: Optional enrichment
        llm_whisperer_metadata: OCR response metadata
        processing_status: ProcessingStatus
        processed_date: When processing completed
    """

    __tablename__ = "module_content"

    module_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("modules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)

    document_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        nullable=True,
        doc="processed_documents.id of the same upload",
    )

    file_name: Mapped[str] = mapped_column(String(255), nullable=False)

    file_type: Mapped[str] = mapped_column(String(128), nullable=False, default="text")

    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)

    extracted_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    processed_content: Mapped[str | None] = mapped_column(Text, nullable=True)

    summary: Mapped[str | None] = mapped_column(Text, nullable=True)

    keywords: Mapped[list | None] = mapped_column(JSON, nullable=True)

    llm_whisperer_metadata: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    processing_status: Mapped[ProcessingStatus] = mapped_column(
        Enum(
            ProcessingStatus,
            native_enum=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=ProcessingStatus.PENDING,
    )

    processed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    module = relationship("ModuleModel", back_populates="contents")
