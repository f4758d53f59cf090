"""
Document metadata client.

Asks a Gemini generateContent endpoint for a title and description of an
uploaded document and parses the JSON object out of the free-text reply.

Dependencies: httpx, tutorbot.configs, tutorbot.core.ingestion
System role: Document title/description generation boundary
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import PurePath

import httpx

from tutorbot.configs import get_settings
from tutorbot.configs.metadata import MetadataSettings
from tutorbot.core.exceptions import (
    ConfigurationError,
    MetadataGenerationError,
    ValidationError,
)
from tutorbot.core.ingestion import truncate_for_model

logger = logging.getLogger(__name__)

MAX_TITLE_CHARS = 100
MAX_DESCRIPTION_CHARS = 500

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

METADATA_PROMPT = """Analyze the following document content and generate a concise title and description for educational purposes.

Document filename: {file_name}

Content:
{content}

Please provide a response in the following JSON format:
{{
  "title": "A clear, descriptive title (max 100 characters)",
  "description": "A brief summary describing the document's content and purpose (max 500 characters)"
}}

Focus on the main topics, key concepts, and educational value of the document."""


@dataclass(frozen=True)
class DocumentMetadata:
    title: str
    description: str


def parse_metadata(generated_text: str, file_name: str | None) -> DocumentMetadata:
    """
    Extract title/description from a model reply.

    Falls back to the file stem and the head of the reply when no JSON
    object can be parsed. Both fields are length-capped.
    """
    parsed: dict = {}
    match = _JSON_OBJECT.search(generated_text)
    try:
        if match is None:
            raise ValueError("no JSON object in reply")
        candidate = json.loads(match.group(0))
        if not isinstance(candidate, dict):
            raise ValueError("JSON reply is not an object")
        parsed = candidate
    except ValueError:
        logger.warning(
            f"{__name__}:parse_metadata - Falling back to raw reply",
            extra={"file_name": file_name},
        )
        parsed = {
            "title": PurePath(file_name).stem if file_name else "Document",
            "description": generated_text[:MAX_DESCRIPTION_CHARS],
        }

    title = str(parsed.get("title") or file_name or "Document")
    description = str(parsed.get("description") or "Educational document")
    return DocumentMetadata(
        title=title[:MAX_TITLE_CHARS],
        description=description[:MAX_DESCRIPTION_CHARS],
    )


class MetadataClient:
    """Gemini generateContent client for document metadata."""

    def __init__(
        self,
        settings: MetadataSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings().metadata
        self._transport = transport

    async def generate_metadata(self, text: str, file_name: str | None = None) -> DocumentMetadata:
        """
        Generate a title and description for document text.

        Args:
            text: Extracted document text (truncated before sending)
            file_name: Optional original file name, used in the prompt and fallbacks

        Returns:
            DocumentMetadata

        Raises:
            ValidationError: Empty text
            ConfigurationError: API key not configured
            MetadataGenerationError: Upstream failure or empty candidate list
        """
        if not text or not text.strip():
            raise ValidationError("Text content is required", field="text")
        if not self.settings.api_key:
            raise ConfigurationError("Gemini API key not configured")

        prompt = METADATA_PROMPT.format(
            file_name=file_name or "Unknown",
            content=truncate_for_model(text, self.settings.max_input_chars),
        )
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.settings.temperature,
                "topK": self.settings.top_k,
                "topP": self.settings.top_p,
                "maxOutputTokens": self.settings.max_output_tokens,
            },
        }
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.settings.api_key,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self.settings.url, json=body, headers=headers)
        except httpx.TransportError as e:
            raise MetadataGenerationError(f"Gemini request failed: {e}") from e

        if response.is_error:
            logger.error(
                f"{__name__}:generate_metadata - Upstream error",
                extra={"status_code": response.status_code, "body": response.text[:500]},
            )
            raise MetadataGenerationError(
                f"Gemini API error: {response.status_code}",
                details={"upstream_status": response.status_code},
            )

        try:
            generated_text = response.json()["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise MetadataGenerationError("No response generated from Gemini API") from e

        metadata = parse_metadata(generated_text, file_name)
        logger.info(
            f"{__name__}:generate_metadata - Metadata generated",
            extra={"file_name": file_name, "title": metadata.title},
        )
        return metadata
