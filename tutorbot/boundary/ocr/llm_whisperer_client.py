"""
LLMWhisperer document ingestion client.

Sends base64-encoded documents to the hosted OCR service and maps its reply
to an IngestionResult. `whisper` performs exactly one upstream call;
`ingest` wraps it in a tenacity retry loop that only retries failures the
upstream (or the transport) marks as transient.

Dependencies: httpx, tenacity, pydantic, tutorbot.configs
System role: Document text extraction boundary
"""

import base64
import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import BaseModel, Field
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from tutorbot.configs import get_settings
from tutorbot.configs.ocr import OCRSettings
from tutorbot.core.exceptions import (
    ConfigurationError,
    DocumentIngestionError,
    ValidationError,
)

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n---PAGE_BREAK---\n\n"


class IngestionOptions(BaseModel):
    """Caller-settable OCR request options; defaults match the hosted service's best layout mode."""

    output_mode: str = Field(default="layout_preserving")
    processing_mode: str = Field(default="ocr")
    force_text_processing: bool = Field(default=True)
    pages_to_extract: str = Field(default="all")
    timeout: int = Field(default=200, description="Server-side processing timeout in seconds")
    line_splitter_tolerance: float = Field(default=0.4)
    horizontal_stretch_factor: float = Field(default=1.0)
    mark_vertical_lines: bool = Field(default=True)
    mark_horizontal_lines: bool = Field(default=True)
    page_separator: str = Field(default=PAGE_SEPARATOR)


@dataclass
class IngestionResult:
    """Extracted text of one document."""

    text: str
    external_id: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "IngestionResult":
        """Map an upstream JSON reply, tolerating both field spellings the service uses."""
        text = payload.get("text") or payload.get("extracted_text") or ""
        external_id = (
            payload.get("document_id")
            or payload.get("id")
            or f"llm-{int(time.time() * 1000)}"
        )
        return cls(
            text=text,
            external_id=str(external_id),
            metadata=payload.get("metadata") or {},
        )


def is_retriable(exc: BaseException) -> bool:
    """tenacity predicate: retry only ingestion failures flagged as transient."""
    return isinstance(exc, DocumentIngestionError) and exc.retriable


def _error_from_response(response: httpx.Response, file_name: str) -> DocumentIngestionError:
    """
    Build a DocumentIngestionError from a non-2xx upstream reply.

    An explicit boolean `retriable` in the JSON body wins; otherwise 5xx is
    transient and 4xx is not.
    """
    body: dict[str, Any] = {}
    try:
        parsed = response.json()
        if isinstance(parsed, dict):
            body = parsed
    except ValueError:
        pass

    message = (
        body.get("error")
        or body.get("message")
        or response.text
        or f"OCR service returned HTTP {response.status_code}"
    )
    flag = body.get("retriable")
    retriable = flag if isinstance(flag, bool) else response.status_code >= 500

    details: dict[str, Any] = {}
    if "details" in body:
        details["upstream_details"] = body["details"]

    return DocumentIngestionError(
        str(message),
        file_name=file_name,
        retriable=retriable,
        upstream_status=response.status_code,
        details=details,
    )


class LLMWhispererClient:
    """
    Client for the LLMWhisperer `/whisper` endpoint.

    Attributes:
        settings: OCR configuration (URL, key, timeouts, retry policy)
    """

    def __init__(
        self,
        settings: OCRSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        wait: wait_base | None = None,
    ) -> None:
        """
        Args:
            settings: OCR settings, defaults to the application settings
            transport: Optional httpx transport (tests pass httpx.MockTransport)
            wait: Optional tenacity wait strategy overriding exponential backoff
        """
        self.settings = settings or get_settings().ocr
        self._transport = transport
        self._wait = wait or wait_exponential(
            multiplier=self.settings.backoff_initial_seconds,
            min=self.settings.backoff_initial_seconds,
            max=self.settings.backoff_max_seconds,
        )

    async def whisper(
        self,
        file_data: str,
        file_name: str,
        options: IngestionOptions | None = None,
    ) -> dict[str, Any]:
        """
        Perform a single OCR call.

        Args:
            file_data: Base64-encoded document bytes
            file_name: Original file name
            options: Request options (defaults applied when None)

        Returns:
            Raw upstream JSON reply

        Raises:
            ConfigurationError: API key not configured
            ValidationError: Missing file data or name
            DocumentIngestionError: Upstream or transport failure
        """
        if not self.settings.api_key:
            raise ConfigurationError("LLMWhisperer API key not configured")
        if not file_data or not file_name:
            raise ValidationError("fileData and fileName are required")

        opts = options or IngestionOptions()
        body = {"file_data": file_data, "file_name": file_name, **opts.model_dump()}
        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self.settings.url, json=body, headers=headers)
        except httpx.TransportError as e:
            raise DocumentIngestionError(
                f"OCR transport error: {e}",
                file_name=file_name,
                retriable=True,
            ) from e

        if response.is_error:
            raise _error_from_response(response, file_name)

        try:
            payload = response.json()
        except ValueError as e:
            raise DocumentIngestionError(
                "OCR service returned a non-JSON body",
                file_name=file_name,
                upstream_status=response.status_code,
            ) from e

        return payload if isinstance(payload, dict) else {"text": str(payload)}

    async def ingest(
        self,
        file_bytes: bytes,
        file_name: str,
        options: IngestionOptions | None = None,
    ) -> IngestionResult:
        """
        Extract text from a document, retrying transient failures.

        Args:
            file_bytes: Raw document bytes
            file_name: Original file name
            options: Request options

        Returns:
            IngestionResult with text, metadata and external id

        Raises:
            ValidationError: Empty file
            ConfigurationError: API key not configured
            DocumentIngestionError: Non-retriable failure, or retries exhausted
        """
        if not file_bytes:
            raise ValidationError("Uploaded file is empty", field="file")
        if not self.settings.api_key:
            raise ConfigurationError("LLMWhisperer API key not configured")

        file_data = base64.b64encode(file_bytes).decode("ascii")
        attempts = 0

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.settings.max_attempts),
            wait=self._wait,
            retry=retry_if_exception(is_retriable),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:ingest - Retry {retry_state.attempt_number}/"
                f"{self.settings.max_attempts} after transient OCR failure",
                extra={"file_name": file_name},
            ),
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    payload = await self.whisper(file_data, file_name, options)
        except DocumentIngestionError as e:
            e.attempts = attempts
            e.details["attempts"] = attempts
            logger.error(
                f"{__name__}:ingest - Ingestion failed",
                extra={
                    "file_name": file_name,
                    "attempts": attempts,
                    "retriable": e.retriable,
                    "error": e.message,
                },
            )
            raise

        result = IngestionResult.from_payload(payload)
        logger.info(
            f"{__name__}:ingest - Extracted text",
            extra={
                "file_name": file_name,
                "attempts": attempts,
                "text_length": len(result.text),
                "external_id": result.external_id,
            },
        )
        return result
