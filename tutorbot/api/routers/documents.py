"""
Document API endpoints.

Routes:
- POST /documents/whisper - Single OCR call, raw upstream reply
- POST /documents/metadata - Title/description generation
- POST /modules/{module_id}/documents - Upload and ingest a document
- GET /modules/{module_id}/documents - Merged document list
- DELETE /modules/{module_id}/documents/{document_id} - Delete a document

Dependencies: tutorbot.application.services, tutorbot.models
System role: Course material HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from tutorbot.api.deps.dependencies import get_current_user_id, get_document_service
from tutorbot.application.services import DocumentService
from tutorbot.core.context import AggregatedDocument
from tutorbot.core.exceptions import (
    ConfigurationError,
    DocumentIngestionError,
    ValidationError,
)
from tutorbot.models.common import DeleteResponse
from tutorbot.models.document import (
    DocumentListResponse,
    DocumentResponse,
    MetadataRequest,
    MetadataResponse,
    UploadDocumentResponse,
    WhisperErrorResponse,
    WhisperRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


def _whisper_error(status_code: int, error: str, details: dict | None, retriable: bool) -> JSONResponse:
    body = WhisperErrorResponse(error=error, details=details or None, retriable=retriable)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def map_document_to_response(doc: AggregatedDocument) -> DocumentResponse:
    return DocumentResponse(
        id=doc.id,
        source=doc.source,
        name=doc.name,
        title=doc.title,
        description=doc.description,
        processing_status=doc.processing_status,
        document_id=doc.document_id,
        text_length=len(doc.text),
        created_at=doc.created_at,
    )


@router.post("/documents/whisper", dependencies=[Depends(get_current_user_id)])
async def whisper(
    request: WhisperRequest,
    document_service: DocumentService = Depends(get_document_service),
):
    """
    Forward one document to the OCR service.

    Success returns the upstream JSON unchanged. Failures return
    {error, details?, retriable} with the upstream status (400 for missing
    fields, 500 when the service key is not configured).
    """
    if not request.file_data or not request.file_name:
        return _whisper_error(400, "Missing required parameters", None, False)

    try:
        return await document_service.whisper(
            request.file_data,
            request.file_name,
            request.options,
        )
    except ValidationError as e:
        return _whisper_error(400, e.message, e.details, False)
    except ConfigurationError as e:
        logger.error("OCR passthrough not configured", extra={"error": e.message})
        return _whisper_error(500, e.message, None, False)
    except DocumentIngestionError as e:
        details = {k: v for k, v in e.details.items() if k == "upstream_details"}
        return _whisper_error(e.upstream_status or 502, e.message, details, e.retriable)


@router.post(
    "/documents/metadata",
    response_model=MetadataResponse,
    dependencies=[Depends(get_current_user_id)],
)
async def generate_metadata(
    request: MetadataRequest,
    document_service: DocumentService = Depends(get_document_service),
) -> MetadataResponse:
    """Generate a title and description for document text."""
    metadata = await document_service.generate_metadata(request.text, request.file_name)
    return MetadataResponse(title=metadata.title, description=metadata.description)


@router.post(
    "/modules/{module_id}/documents",
    response_model=UploadDocumentResponse,
    status_code=201,
)
async def upload_document(
    module_id: UUID,
    file: UploadFile = File(...),
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> UploadDocumentResponse:
    """
    Upload a document to a module.

    The file is OCR'd (with retries), stored in both content tables, cleaned
    and given a generated title/description.
    """
    file_bytes = await file.read()
    logger.info(
        "Document upload",
        extra={
            "module_id": str(module_id),
            "file_name": file.filename,
            "file_size": len(file_bytes),
        },
    )

    uploaded = await document_service.upload_document(
        module_id=module_id,
        user_id=user_id,
        file_bytes=file_bytes,
        file_name=file.filename or "",
        content_type=file.content_type,
    )

    status = uploaded.content.processing_status
    return UploadDocumentResponse(
        content_id=uploaded.content.id,
        document_id=uploaded.document.id,
        module_id=module_id,
        file_name=uploaded.content.file_name,
        title=uploaded.document.title,
        description=uploaded.document.description,
        processing_status=status.value if hasattr(status, "value") else str(status),
        text_length=len(uploaded.content.processed_content or ""),
        external_id=uploaded.document.llm_whisperer_id,
    )


@router.get("/modules/{module_id}/documents", response_model=DocumentListResponse)
async def list_documents(
    module_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """Merged, deduplicated document list, newest first."""
    documents = await document_service.list_documents(module_id, user_id)
    return DocumentListResponse(
        documents=[map_document_to_response(doc) for doc in documents],
        total=len(documents),
    )


@router.delete("/modules/{module_id}/documents/{document_id}", response_model=DeleteResponse)
async def delete_document(
    module_id: UUID,
    document_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    document_service: DocumentService = Depends(get_document_service),
) -> DeleteResponse:
    """Delete a document (uploader, module owner or admin)."""
    await document_service.delete_document(module_id, document_id, user_id)
    return DeleteResponse(id=str(document_id))
