"""
Document service orchestrator.

Coordinates the course-material lifecycle: OCR ingestion of uploads,
persistence into module_content and processed_documents, content cleaning,
metadata generation, merged listing and deletion.

Dependencies: tutorbot.boundary.ocr, tutorbot.boundary.llm, tutorbot.boundary.db.CRUD, tutorbot.core
System role: Document use case orchestration
"""

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.application.services.module_service import ModuleService
from tutorbot.boundary.db.base import utcnow
from tutorbot.boundary.db.CRUD import (
    module_content_crud,
    processed_document_crud,
    user_role_crud,
)
from tutorbot.boundary.db.models import (
    ModuleContentModel,
    ProcessedDocumentModel,
    ProcessingStatus,
)
from tutorbot.boundary.llm import DocumentMetadata, MetadataClient
from tutorbot.boundary.ocr import IngestionOptions, LLMWhispererClient
from tutorbot.core.context import AggregatedDocument, ContentAggregator
from tutorbot.core.exceptions import (
    ConfigurationError,
    MetadataGenerationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from tutorbot.core.ingestion import analyze_content_structure, clean_processed_content

logger = logging.getLogger(__name__)


@dataclass
class UploadedDocument:
    """Rows written for one upload."""

    content: ModuleContentModel
    document: ProcessedDocumentModel


class DocumentService:
    """
    Document service orchestrator.

    Attributes:
        db: Async database session
        ocr_client: OCR boundary client
        metadata_client: Metadata generation boundary client
    """

    def __init__(
        self,
        db: AsyncSession,
        ocr_client: LLMWhispererClient,
        metadata_client: MetadataClient,
    ) -> None:
        self.db = db
        self.ocr_client = ocr_client
        self.metadata_client = metadata_client
        self.module_service = ModuleService(db)
        self.aggregator = ContentAggregator(db)

    async def whisper(
        self,
        file_data: str,
        file_name: str,
        options: IngestionOptions | None = None,
    ) -> dict[str, Any]:
        """Single OCR call, returning the raw upstream reply."""
        return await self.ocr_client.whisper(file_data, file_name, options)

    async def generate_metadata(self, text: str, file_name: str | None = None) -> DocumentMetadata:
        return await self.metadata_client.generate_metadata(text, file_name)

    async def upload_document(
        self,
        module_id: UUID,
        user_id: UUID,
        file_bytes: bytes,
        file_name: str,
        content_type: str | None = None,
        options: IngestionOptions | None = None,
    ) -> UploadedDocument:
        """
        Ingest an uploaded file into a module.

        Steps:
            1. OCR with retries
            2. processed_documents + linked module_content rows (pending)
            3. content cleaning (processing -> completed)
            4. title/description generation, skipped on failure

        Raises:
            NotFoundError / PermissionDeniedError: Module missing or not modifiable
            ValidationError: Empty file or file name
            DocumentIngestionError: OCR failed (nothing is persisted)
        """
        if not file_name:
            raise ValidationError("File name is required", field="file")
        module = await self.module_service.get_modifiable_module(module_id, user_id)

        result = await self.ocr_client.ingest(file_bytes, file_name, options)

        document = await processed_document_crud.create(
            self.db,
            course_id=module.id,
            user_id=user_id,
            original_filename=file_name,
            processed_text=result.text,
            llm_whisperer_id=result.external_id,
            document_metadata=result.metadata,
        )
        content = await module_content_crud.create(
            self.db,
            module_id=module.id,
            user_id=user_id,
            document_id=document.id,
            file_name=file_name,
            file_type=content_type or "application/octet-stream",
            file_size=len(file_bytes),
            extracted_text=result.text,
            llm_whisperer_metadata=result.metadata,
            processing_status=ProcessingStatus.PENDING,
        )
        await self.db.commit()
        logger.info(
            "Document stored",
            extra={
                "module_id": str(module.id),
                "content_id": str(content.id),
                "document_id": str(document.id),
                "file_name": file_name,
                "text_length": len(result.text),
            },
        )

        content = await self.process_content(content.id)
        document = await self._apply_metadata(document, content, file_name)
        return UploadedDocument(content=content, document=document)

    async def process_content(self, content_id: UUID) -> ModuleContentModel:
        """
        Clean extracted text into processed_content.

        Walks the row through processing -> completed; on error marks it
        failed and re-raises.

        Raises:
            NotFoundError: Unknown content row
        """
        content = await module_content_crud.get_by_id(self.db, content_id)
        if content is None:
            raise NotFoundError("module_content", content_id)

        await module_content_crud.update_by_id(
            self.db, content.id, processing_status=ProcessingStatus.PROCESSING
        )
        await self.db.commit()

        try:
            text = content.extracted_text or ""
            cleaned = clean_processed_content(text)
            analysis = analyze_content_structure(cleaned) if cleaned.strip() else None
            updated = await module_content_crud.update_by_id(
                self.db,
                content.id,
                processed_content=cleaned,
                keywords=analysis.topics if analysis else [],
                processing_status=ProcessingStatus.COMPLETED,
                processed_date=utcnow(),
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Content processing failed",
                extra={"content_id": str(content_id), "error": str(e)},
            )
            await module_content_crud.update_by_id(
                self.db, content_id, processing_status=ProcessingStatus.FAILED
            )
            await self.db.commit()
            raise

        logger.info(
            "Content processed",
            extra={
                "content_id": str(content_id),
                "content_length": len(cleaned),
                "subject": analysis.subject if analysis else None,
            },
        )
        return updated

    async def _apply_metadata(
        self,
        document: ProcessedDocumentModel,
        content: ModuleContentModel,
        file_name: str,
    ) -> ProcessedDocumentModel:
        text = content.processed_content or ""
        if not text.strip():
            return document
        try:
            metadata = await self.metadata_client.generate_metadata(text, file_name)
        except (MetadataGenerationError, ConfigurationError) as e:
            logger.warning(
                "Metadata generation skipped",
                extra={"document_id": str(document.id), "error": str(e)},
            )
            return document

        document = await processed_document_crud.update_by_id(
            self.db,
            document.id,
            title=metadata.title,
            description=metadata.description,
        )
        await module_content_crud.update_by_id(self.db, content.id, summary=metadata.description)
        await self.db.commit()
        return document

    async def list_documents(self, module_id: UUID, user_id: UUID) -> list[AggregatedDocument]:
        """Merged, deduplicated documents of a visible module, newest first."""
        module = await self.module_service.get_module(module_id, user_id)
        return await self.aggregator.list_module_documents(module.id)

    async def delete_document(self, module_id: UUID, document_id: UUID, user_id: UUID) -> None:
        """
        Delete one merged-list entry.

        document_id may name a module_content row (its linked
        processed_documents row goes with it) or an unlinked
        processed_documents row of the module.

        Raises:
            NotFoundError: No such document in the module
            PermissionDeniedError: Caller is neither uploader, module owner nor admin
        """
        module = await self.module_service.get_module(module_id, user_id)

        content = await module_content_crud.get_by_id(self.db, document_id)
        if content is not None and content.module_id == module.id:
            await self._require_can_delete(content.user_id, module.user_id, user_id)
            if content.document_id is not None:
                await processed_document_crud.delete_by_id(self.db, content.document_id)
            await module_content_crud.delete_by_id(self.db, content.id)
        else:
            document = await processed_document_crud.get_by_id(self.db, document_id)
            if document is None or document.course_id != module.id:
                raise NotFoundError("document", document_id)
            await self._require_can_delete(document.user_id, module.user_id, user_id)
            await processed_document_crud.delete_by_id(self.db, document.id)

        await self.db.commit()
        logger.info(
            "Document deleted",
            extra={"module_id": str(module_id), "document_id": str(document_id)},
        )

    async def _require_can_delete(
        self,
        uploader_id: UUID | None,
        module_owner_id: UUID,
        user_id: UUID,
    ) -> None:
        if user_id in (uploader_id, module_owner_id):
            return
        if await user_role_crud.is_admin(self.db, user_id):
            return
        raise PermissionDeniedError("Only the uploader, module owner or an admin can delete documents")
