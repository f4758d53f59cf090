"""
Test suite for the document ingestion service.

OCR and metadata clients are AsyncMocks; persistence runs on SQLite.

System role: Verification of upload, processing and deletion of course documents
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from tutorbot.application.services import DocumentService
from tutorbot.boundary.db.CRUD import (
    module_content_crud,
    module_crud,
    processed_document_crud,
    user_role_crud,
)
from tutorbot.boundary.db.models import ProcessingStatus, UserRole
from tutorbot.boundary.llm import DocumentMetadata
from tutorbot.boundary.ocr import IngestionResult
from tutorbot.core.exceptions import (
    DocumentIngestionError,
    MetadataGenerationError,
    NotFoundError,
    PermissionDeniedError,
)


@pytest.fixture
def ocr_client() -> AsyncMock:
    client = AsyncMock()
    client.ingest = AsyncMock(
        return_value=IngestionResult(
            text="Chapter 1: Sorting\nQuicksort partitions the array.\x00",
            external_id="whisper-42",
            metadata={"pages": 3},
        )
    )
    return client


@pytest.fixture
def metadata_client() -> AsyncMock:
    client = AsyncMock()
    client.generate_metadata = AsyncMock(
        return_value=DocumentMetadata(title="Sorting Basics", description="Covers quicksort.")
    )
    return client


@pytest.fixture
def document_service(test_async_db, ocr_client, metadata_client) -> DocumentService:
    return DocumentService(db=test_async_db, ocr_client=ocr_client, metadata_client=metadata_client)


@pytest.fixture
async def module(test_async_db, user_id):
    return await module_crud.create(test_async_db, user_id=user_id, name="Algorithms")


class TestUploadDocument:
    async def test_upload_creates_linked_rows(self, document_service, test_async_db, module, user_id) -> None:
        # Act
        uploaded = await document_service.upload_document(
            module.id, user_id, b"%PDF-1.4", "sorting.pdf", "application/pdf"
        )

        # Assert
        content, document = uploaded.content, uploaded.document
        assert content.document_id == document.id
        assert content.processing_status == ProcessingStatus.COMPLETED
        assert content.processed_date is not None
        assert "\x00" not in content.processed_content
        assert content.summary == "Covers quicksort."
        assert content.file_size == len(b"%PDF-1.4")
        assert document.llm_whisperer_id == "whisper-42"
        assert document.document_metadata == {"pages": 3}
        assert document.title == "Sorting Basics"
        assert document.description == "Covers quicksort."

    async def test_uploaded_document_listed_once(self, document_service, module, user_id) -> None:
        # Arrange
        await document_service.upload_document(module.id, user_id, b"data", "sorting.pdf")

        # Act
        docs = await document_service.list_documents(module.id, user_id)

        # Assert
        assert len(docs) == 1
        assert docs[0].source == "module_content"
        assert docs[0].name == "sorting.pdf"

    async def test_metadata_failure_keeps_upload(
        self, document_service, metadata_client, module, user_id
    ) -> None:
        # Arrange
        metadata_client.generate_metadata.side_effect = MetadataGenerationError("quota exceeded")

        # Act
        uploaded = await document_service.upload_document(module.id, user_id, b"data", "notes.txt")

        # Assert
        assert uploaded.document.title is None
        assert uploaded.content.processing_status == ProcessingStatus.COMPLETED

    async def test_ocr_failure_persists_nothing(
        self, document_service, ocr_client, test_async_db, module, user_id
    ) -> None:
        # Arrange
        ocr_client.ingest.side_effect = DocumentIngestionError("upstream down", attempts=3)

        # Act
        with pytest.raises(DocumentIngestionError):
            await document_service.upload_document(module.id, user_id, b"data", "notes.txt")

        # Assert
        assert await module_content_crud.count_for_module(test_async_db, module.id) == 0
        assert await processed_document_crud.count_for_module(test_async_db, module.id) == 0

    async def test_upload_to_foreign_module_denied(self, document_service, ocr_client, module) -> None:
        with pytest.raises(PermissionDeniedError):
            await document_service.upload_document(module.id, uuid.uuid4(), b"data", "notes.txt")
        ocr_client.ingest.assert_not_awaited()


class TestProcessContent:
    async def test_unknown_content_not_found(self, document_service) -> None:
        with pytest.raises(NotFoundError):
            await document_service.process_content(uuid.uuid4())

    async def test_empty_text_completes_without_keywords(
        self, document_service, test_async_db, module
    ) -> None:
        # Arrange
        content = await module_content_crud.create(
            test_async_db, module_id=module.id, file_name="blank.pdf", extracted_text=""
        )

        # Act
        processed = await document_service.process_content(content.id)

        # Assert
        assert processed.processing_status == ProcessingStatus.COMPLETED
        assert processed.processed_content == ""
        assert processed.keywords == []


class TestDeleteDocument:
    async def test_delete_content_removes_linked_document(
        self, document_service, test_async_db, module, user_id
    ) -> None:
        # Arrange
        uploaded = await document_service.upload_document(module.id, user_id, b"data", "a.pdf")

        # Act
        await document_service.delete_document(module.id, uploaded.content.id, user_id)

        # Assert
        assert await document_service.list_documents(module.id, user_id) == []
        assert await processed_document_crud.get_by_id(test_async_db, uploaded.document.id) is None

    async def test_delete_unlinked_processed_document(
        self, document_service, test_async_db, module, user_id
    ) -> None:
        # Arrange
        document = await processed_document_crud.create(
            test_async_db, course_id=module.id, user_id=user_id, original_filename="legacy.pdf"
        )

        # Act
        await document_service.delete_document(module.id, document.id, user_id)

        # Assert
        assert await processed_document_crud.count_for_module(test_async_db, module.id) == 0

    async def test_unknown_document_not_found(self, document_service, module, user_id) -> None:
        with pytest.raises(NotFoundError):
            await document_service.delete_document(module.id, uuid.uuid4(), user_id)

    async def test_other_user_cannot_delete_from_global_module(
        self, document_service, test_async_db, user_id
    ) -> None:
        # Arrange
        module = await module_crud.create(test_async_db, user_id=user_id, name="Shared", is_global=True)
        uploaded = await document_service.upload_document(module.id, user_id, b"data", "a.pdf")

        # Act / Assert
        with pytest.raises(PermissionDeniedError):
            await document_service.delete_document(module.id, uploaded.content.id, uuid.uuid4())

    async def test_admin_can_delete(self, document_service, test_async_db, module, user_id, admin_id) -> None:
        # Arrange
        await user_role_crud.set_role(test_async_db, admin_id, UserRole.ADMIN)
        uploaded = await document_service.upload_document(module.id, user_id, b"data", "a.pdf")

        # Act
        await document_service.delete_document(module.id, uploaded.content.id, admin_id)

        # Assert
        assert await module_content_crud.count_for_module(test_async_db, module.id) == 0
