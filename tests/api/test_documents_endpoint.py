"""
Tests for document endpoints: OCR passthrough, metadata, upload, list, delete.

System role: Verification of the course material HTTP contract
"""

import uuid
from types import SimpleNamespace

from tutorbot.api.deps.dependencies import get_document_service
from tutorbot.boundary.db.models import ProcessingStatus
from tutorbot.boundary.llm import DocumentMetadata
from tutorbot.core.context import AggregatedDocument
from tutorbot.core.exceptions import (
    ConfigurationError,
    DocumentIngestionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

from factories import NOW

WHISPER_URL = "/api/v1/documents/whisper"


class TestWhisperPassthrough:
    def test_success_returns_upstream_json_unchanged(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        upstream = {"text": "Page one", "document_id": "abc", "pages": 1}
        service.whisper.return_value = upstream

        # Act
        response = client.post(
            WHISPER_URL,
            json={"fileData": "aGVsbG8=", "fileName": "a.pdf", "options": {"output_mode": "text"}},
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == upstream
        file_data, file_name, options = service.whisper.await_args.args
        assert (file_data, file_name) == ("aGVsbG8=", "a.pdf")
        assert options.output_mode == "text"

    def test_missing_fields_is_400(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)

        # Act
        response = client.post(WHISPER_URL, json={"fileName": "a.pdf"})

        # Assert
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters", "retriable": False}
        service.whisper.assert_not_awaited()

    def test_missing_api_key_is_500(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        service.whisper.side_effect = ConfigurationError("OCR API key is not configured")

        # Act
        response = client.post(WHISPER_URL, json={"fileData": "eA==", "fileName": "a.pdf"})

        # Assert
        assert response.status_code == 500
        assert response.json()["retriable"] is False

    def test_upstream_status_and_retriable_flag_passed_through(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        service.whisper.side_effect = DocumentIngestionError(
            "Service busy",
            file_name="a.pdf",
            retriable=True,
            upstream_status=503,
        )

        # Act
        response = client.post(WHISPER_URL, json={"fileData": "eA==", "fileName": "a.pdf"})

        # Assert
        assert response.status_code == 503
        body = response.json()
        assert body["error"] == "Service busy"
        assert body["retriable"] is True

    def test_transport_failure_is_502(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        service.whisper.side_effect = DocumentIngestionError("connection reset", retriable=True)

        # Act
        response = client.post(WHISPER_URL, json={"fileData": "eA==", "fileName": "a.pdf"})

        # Assert
        assert response.status_code == 502
        assert response.json()["retriable"] is True

    def test_client_side_validation_is_400(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        service.whisper.side_effect = ValidationError("fileData is empty", field="fileData")

        # Act
        response = client.post(WHISPER_URL, json={"fileData": "eA==", "fileName": "a.pdf"})

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "fileData is empty"


class TestMetadataEndpoint:
    def test_returns_title_and_description(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        service.generate_metadata.return_value = DocumentMetadata(title="Heaps", description="Priority queues.")

        # Act
        response = client.post(
            "/api/v1/documents/metadata",
            json={"text": "A heap is a tree.", "fileName": "heaps.pdf"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"title": "Heaps", "description": "Priority queues."}
        service.generate_metadata.assert_awaited_once_with("A heap is a tree.", "heaps.pdf")

    def test_empty_text_rejected(self, client, override) -> None:
        override(get_document_service)

        response = client.post("/api/v1/documents/metadata", json={"text": ""})

        assert response.status_code == 400


class TestModuleDocuments:
    def test_upload_returns_201(self, client, override, user_id) -> None:
        # Arrange
        service = override(get_document_service)
        module_id = uuid.uuid4()
        content = SimpleNamespace(
            id=uuid.uuid4(),
            file_name="heaps.pdf",
            processing_status=ProcessingStatus.COMPLETED,
            processed_content="A heap is a tree.",
        )
        document = SimpleNamespace(
            id=uuid.uuid4(),
            title="Heaps",
            description="Priority queues.",
            llm_whisperer_id="w-1",
        )
        service.upload_document.return_value = SimpleNamespace(content=content, document=document)

        # Act
        response = client.post(
            f"/api/v1/modules/{module_id}/documents",
            files={"file": ("heaps.pdf", b"%PDF", "application/pdf")},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["processing_status"] == "completed"
        assert body["text_length"] == len("A heap is a tree.")
        assert body["external_id"] == "w-1"
        kwargs = service.upload_document.await_args.kwargs
        assert kwargs["file_bytes"] == b"%PDF"
        assert kwargs["file_name"] == "heaps.pdf"
        assert kwargs["user_id"] == user_id

    def test_upload_to_foreign_module_is_403(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        service.upload_document.side_effect = PermissionDeniedError("not yours")

        # Act
        response = client.post(
            f"/api/v1/modules/{uuid.uuid4()}/documents",
            files={"file": ("a.txt", b"x", "text/plain")},
        )

        # Assert
        assert response.status_code == 403

    def test_list_documents(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        doc = AggregatedDocument(
            id=uuid.uuid4(),
            source="module_content",
            name="heaps.pdf",
            text="A heap is a tree.",
            created_at=NOW,
            processing_status="completed",
        )
        service.list_documents.return_value = [doc]

        # Act
        response = client.get(f"/api/v1/modules/{uuid.uuid4()}/documents")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["documents"][0]["name"] == "heaps.pdf"
        assert body["documents"][0]["text_length"] == len("A heap is a tree.")

    def test_delete_unknown_document_is_404(self, client, override) -> None:
        # Arrange
        service = override(get_document_service)
        document_id = uuid.uuid4()
        service.delete_document.side_effect = NotFoundError("document", document_id)

        # Act
        response = client.delete(f"/api/v1/modules/{uuid.uuid4()}/documents/{document_id}")

        # Assert
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_delete_document(self, client, override) -> None:
        # Arrange
        override(get_document_service)
        document_id = uuid.uuid4()

        # Act
        response = client.delete(f"/api/v1/modules/{uuid.uuid4()}/documents/{document_id}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True, "id": str(document_id)}
