"""
Content aggregator.

Course material lives in two tables: module_content (authoritative) and
processed_documents. The aggregator reads both for a module, drops the
processed_documents rows already represented in module_content, and renders
the remainder as one sentinel-prefixed context string for the prompt.

Dependencies: sqlalchemy, tutorbot.boundary.db.CRUD, tutorbot.core.prompting
System role: Module context retrieval for the chat pipeline
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD import module_content_crud, processed_document_crud
from tutorbot.boundary.db.models import ModuleContentModel, ProcessedDocumentModel
from tutorbot.core.prompting.module_context import CONTENT_SENTINEL

logger = logging.getLogger(__name__)

DOCUMENT_SEPARATOR = "\n\n---\n\n"
UNNAMED_DOCUMENT = "Unnamed document"

DocumentSource = Literal["module_content", "processed_documents"]


@dataclass(frozen=True)
class AggregatedDocument:
    """
    One course document after merging both content tables.

    Attributes:
        id: Row id in its source table
        source: Table the row came from
        name: Display name
        text: Usable text (may be blank for unprocessed rows)
        created_at: Row creation time
        title / description: Generated metadata, when known
        processing_status: module_content status, None for processed documents
        document_id: processed_documents id linked from a module_content row
    """

    id: UUID
    source: DocumentSource
    name: str
    text: str
    created_at: datetime | None = None
    title: str | None = None
    description: str | None = None
    processing_status: str | None = None
    document_id: UUID | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())


@dataclass(frozen=True)
class ModuleDocumentCounts:
    module_content: int
    processed_documents: int

    @property
    def total(self) -> int:
        return self.module_content + self.processed_documents


def _from_module_content(row: ModuleContentModel) -> AggregatedDocument:
    status = row.processing_status
    return AggregatedDocument(
        id=row.id,
        source="module_content",
        name=row.file_name or UNNAMED_DOCUMENT,
        text=row.processed_content or row.extracted_text or "",
        created_at=row.created_at,
        title=None,
        description=row.summary,
        processing_status=status.value if hasattr(status, "value") else status,
        document_id=row.document_id,
    )


def _from_processed_document(row: ProcessedDocumentModel) -> AggregatedDocument:
    return AggregatedDocument(
        id=row.id,
        source="processed_documents",
        name=row.original_filename or row.title or UNNAMED_DOCUMENT,
        text=row.processed_text or "",
        created_at=row.created_at,
        title=row.title,
        description=row.description,
    )


def merge_documents(
    content_rows: Sequence[ModuleContentModel],
    processed_rows: Sequence[ProcessedDocumentModel],
) -> list[AggregatedDocument]:
    """
    Merge both tables, module_content first.

    A processed_documents row is dropped when a module_content row of the
    same module links to it through document_id. Input order is preserved
    within each table.
    """
    linked_ids = {row.document_id for row in content_rows if row.document_id is not None}
    documents = [_from_module_content(row) for row in content_rows]
    documents.extend(
        _from_processed_document(row) for row in processed_rows if row.id not in linked_ids
    )
    return documents


def render_module_context(documents: Sequence[AggregatedDocument]) -> str | None:
    """
    Render documents with usable text as prompt context.

    Returns:
        Sentinel-prefixed context, or None when no document has text
    """
    blocks = [
        f"File: {doc.name}\nContent:\n{doc.text}" for doc in documents if doc.has_text
    ]
    if not blocks:
        return None
    return f"{CONTENT_SENTINEL}\n\n" + DOCUMENT_SEPARATOR.join(blocks)


class ContentAggregator:
    """
    Reads and merges a module's course material.

    Attributes:
        db: Async database session
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_module_documents(
        self,
        module_id: UUID,
        newest_first: bool = True,
    ) -> list[AggregatedDocument]:
        """Deduplicated documents of a module, including rows without text yet."""
        content_rows = await module_content_crud.list_for_module(
            self.db, module_id, newest_first=newest_first
        )
        processed_rows = await processed_document_crud.list_for_module(
            self.db, module_id, newest_first=newest_first
        )
        return merge_documents(content_rows, processed_rows)

    async def get_module_context(self, module_id: UUID) -> str | None:
        """
        Aggregated course content for a module.

        Args:
            module_id: Module UUID

        Returns:
            Sentinel-prefixed context string, or None when the module has no usable text
        """
        documents = await self.list_module_documents(module_id)
        context = render_module_context(documents)

        logger.info(
            f"{__name__}:get_module_context - Aggregated module content",
            extra={
                "module_id": str(module_id),
                "documents": len(documents),
                "with_text": sum(1 for doc in documents if doc.has_text),
                "context_length": len(context) if context else 0,
            },
        )
        return context

    async def count_module_documents(self, module_id: UUID) -> ModuleDocumentCounts:
        """Raw row counts in both content tables for a module."""
        return ModuleDocumentCounts(
            module_content=await module_content_crud.count_for_module(self.db, module_id),
            processed_documents=await processed_document_crud.count_for_module(
                self.db, module_id
            ),
        )
