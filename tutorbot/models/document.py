"""
Document domain models and schemas.

Request/response schemas for OCR passthrough, uploads, listing and metadata.

Dependencies: pydantic
System role: Document API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from tutorbot.boundary.ocr import IngestionOptions


class WhisperRequest(BaseModel):
    """Request schema for the OCR passthrough."""

    model_config = ConfigDict(populate_by_name=True)

    file_data: str | None = Field(None, alias="fileData", description="Base64-encoded file")
    file_name: str | None = Field(None, alias="fileName", description="Original file name")
    options: IngestionOptions | None = Field(None, description="OCR options")


class WhisperErrorResponse(BaseModel):
    error: str
    details: dict | None = None
    retriable: bool = False


class MetadataRequest(BaseModel):
    """Request schema for title/description generation."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1, description="Document text")
    file_name: str | None = Field(None, alias="fileName")


class MetadataResponse(BaseModel):
    title: str
    description: str


class DocumentResponse(BaseModel):
    """One entry of the merged module document list."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    source: Literal["module_content", "processed_documents"]
    name: str
    title: str | None = None
    description: str | None = None
    processing_status: str | None = None
    document_id: uuid.UUID | None = None
    text_length: int = 0
    created_at: datetime | None = None


class DocumentListResponse(BaseModel):
    documents: list[DocumentResponse]
    total: int


class UploadDocumentResponse(BaseModel):
    """Response schema for an upload."""

    content_id: uuid.UUID
    document_id: uuid.UUID
    module_id: uuid.UUID
    file_name: str
    title: str | None
    description: str | None
    processing_status: str
    text_length: int
    external_id: str | None
