"""
OCR boundary.

Client for the hosted LLMWhisperer-compatible text extraction endpoint.
"""

from tutorbot.boundary.ocr.llm_whisperer_client import (
    IngestionOptions,
    IngestionResult,
    LLMWhispererClient,
    is_retriable,
)

__all__ = ["IngestionOptions", "IngestionResult", "LLMWhispererClient", "is_retriable"]
