"""
Test suite for the LLMWhisperer OCR client.

Upstream calls are served by httpx.MockTransport; backoff is disabled with
tenacity's wait_none so retries run instantly.

System role: Verification of document ingestion and its retry policy
"""

import base64
import json

import httpx
import pytest
from tenacity import wait_none

from tutorbot.boundary.ocr import IngestionOptions, IngestionResult, LLMWhispererClient
from tutorbot.configs.ocr import OCRSettings
from tutorbot.core.exceptions import ConfigurationError, DocumentIngestionError, ValidationError

OCR_URL = "https://ocr.test/v1/whisper"


@pytest.fixture
def ocr_settings() -> OCRSettings:
    return OCRSettings(api_key="test-key", url=OCR_URL, max_attempts=3)


@pytest.fixture
def make_client(ocr_settings):
    def _make(transport: httpx.MockTransport) -> LLMWhispererClient:
        return LLMWhispererClient(ocr_settings, transport=transport, wait=wait_none())

    return _make


def ok(payload: dict | None = None) -> httpx.Response:
    return httpx.Response(200, json=payload or {"text": "Extracted", "document_id": "doc-1"})


class TestIngestRetries:
    """Retry behaviour of ingest()."""

    async def test_two_transient_failures_then_success(self, make_client, recording_transport) -> None:
        # Arrange
        transport = recording_transport(
            httpx.Response(503, json={"error": "busy"}),
            httpx.Response(500, json={"error": "oops"}),
            ok(),
        )
        client = make_client(transport)

        # Act
        result = await client.ingest(b"%PDF-1.4", "notes.pdf")

        # Assert
        assert transport.call_count == 3
        assert result.text == "Extracted"
        assert result.external_id == "doc-1"

    async def test_non_retriable_flag_aborts_after_one_call(self, make_client, recording_transport) -> None:
        # Arrange
        transport = recording_transport(
            httpx.Response(503, json={"error": "unsupported file", "retriable": False})
        )
        client = make_client(transport)

        # Act
        with pytest.raises(DocumentIngestionError) as exc_info:
            await client.ingest(b"data", "notes.pdf")

        # Assert
        assert transport.call_count == 1
        assert exc_info.value.retriable is False
        assert exc_info.value.attempts == 1
        assert exc_info.value.message == "unsupported file"

    async def test_client_error_is_not_retried(self, make_client, recording_transport) -> None:
        # Arrange
        transport = recording_transport(httpx.Response(400, json={"error": "bad file"}))

        # Act
        with pytest.raises(DocumentIngestionError) as exc_info:
            await make_client(transport).ingest(b"data", "notes.pdf")

        # Assert
        assert transport.call_count == 1
        assert exc_info.value.upstream_status == 400

    async def test_explicit_retriable_flag_on_client_error_retries(
        self, make_client, recording_transport
    ) -> None:
        # Arrange
        transport = recording_transport(
            httpx.Response(429, json={"error": "slow down", "retriable": True}),
            ok(),
        )

        # Act
        result = await make_client(transport).ingest(b"data", "notes.pdf")

        # Assert
        assert transport.call_count == 2
        assert result.text == "Extracted"

    async def test_exhaustion_reports_last_error_and_attempts(
        self, make_client, recording_transport
    ) -> None:
        # Arrange
        transport = recording_transport(
            httpx.Response(502, json={"error": "first"}),
            httpx.Response(502, json={"error": "second"}),
            httpx.Response(502, json={"error": "last"}),
        )

        # Act
        with pytest.raises(DocumentIngestionError) as exc_info:
            await make_client(transport).ingest(b"data", "notes.pdf")

        # Assert
        assert transport.call_count == 3
        assert exc_info.value.attempts == 3
        assert exc_info.value.message == "last"
        assert exc_info.value.retriable is True

    async def test_transport_errors_are_retried(self, make_client, recording_transport) -> None:
        # Arrange
        transport = recording_transport(httpx.ConnectError("connection refused"), ok())

        # Act
        result = await make_client(transport).ingest(b"data", "notes.pdf")

        # Assert
        assert transport.call_count == 2
        assert result.text == "Extracted"


class TestIngestRequest:
    """Request construction and result mapping."""

    async def test_request_body_and_auth(self, make_client, recording_transport) -> None:
        # Arrange
        transport = recording_transport(ok())

        # Act
        await make_client(transport).ingest(
            b"hello", "notes.pdf", IngestionOptions(pages_to_extract="1-3")
        )

        # Assert
        request = transport.requests[0]
        body = json.loads(request.content)
        assert str(request.url) == OCR_URL
        assert request.headers["Authorization"] == "Bearer test-key"
        assert body["file_data"] == base64.b64encode(b"hello").decode()
        assert body["file_name"] == "notes.pdf"
        assert body["pages_to_extract"] == "1-3"
        assert body["output_mode"] == "layout_preserving"
        assert body["page_separator"] == "\n\n---PAGE_BREAK---\n\n"

    async def test_empty_file_rejected_before_network(self, make_client, recording_transport) -> None:
        # Arrange
        transport = recording_transport(ok())

        # Act / Assert
        with pytest.raises(ValidationError):
            await make_client(transport).ingest(b"", "notes.pdf")
        assert transport.call_count == 0

    async def test_missing_key_rejected_before_network(self, recording_transport) -> None:
        # Arrange
        transport = recording_transport(ok())
        client = LLMWhispererClient(OCRSettings(api_key=None, url=OCR_URL), transport=transport)

        # Act / Assert
        with pytest.raises(ConfigurationError):
            await client.ingest(b"data", "notes.pdf")
        assert transport.call_count == 0


class TestIngestionResultMapping:
    def test_alternate_field_names(self) -> None:
        # Act
        result = IngestionResult.from_payload({"extracted_text": "t", "id": "abc", "metadata": {"pages": 2}})

        # Assert
        assert result.text == "t"
        assert result.external_id == "abc"
        assert result.metadata == {"pages": 2}

    def test_generated_id_and_defaults(self) -> None:
        # Act
        result = IngestionResult.from_payload({})

        # Assert
        assert result.text == ""
        assert result.external_id.startswith("llm-")
        assert result.metadata == {}
