"""
Exception hierarchy for the TutorBot application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging, and carry
the HTTP status the API layer renders them with.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TutorBotException(Exception):
    """Base exception for all TutorBot application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(TutorBotException):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(TutorBotException):
    """Raised when a requested row does not exist (or is not visible to the caller)."""

    status_code = 404

    def __init__(
        self,
        resource: str,
        resource_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details[f"{resource}_id"] = str(resource_id)
        super().__init__(f"{resource.capitalize()} not found: {resource_id}", details)


class AuthenticationError(TutorBotException):
    """Raised when the caller identity header is missing or malformed."""

    status_code = 401


class PermissionDeniedError(TutorBotException):
    """Raised when the caller lacks the role or ownership an operation needs."""

    status_code = 403


class ConfigurationError(TutorBotException):
    """Raised when required server-side configuration (API keys, URLs) is missing."""

    status_code = 500


class UpstreamServiceError(TutorBotException):
    """Base exception for failures of hosted third-party APIs."""

    status_code = 502


class DocumentIngestionError(UpstreamServiceError):
    """Raised when the OCR service cannot extract text from a document."""

    def __init__(
        self,
        message: str,
        file_name: str | None = None,
        retriable: bool = False,
        attempts: int = 1,
        upstream_status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document ingestion error.

        Args:
            message: Last upstream error message
            file_name: Name of the document being ingested
            retriable: Whether the upstream marked the failure as transient
            attempts: Number of upstream calls performed
            upstream_status: HTTP status of the last upstream response, if any
            details: Additional context
        """
        self.retriable = retriable
        self.attempts = attempts
        self.upstream_status = upstream_status
        details = details or {}
        if file_name:
            details["file_name"] = file_name
        details["retriable"] = retriable
        details["attempts"] = attempts
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        super().__init__(message, details)


class ChatCompletionError(UpstreamServiceError):
    """Raised when the chat completions endpoint returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.upstream_status = status_code
        details = details or {}
        if status_code is not None:
            details["upstream_status"] = status_code
        super().__init__(message, details)


class MalformedResponseError(UpstreamServiceError):
    """Raised when an upstream response lacks the fields the caller needs."""

    status_code = 500


class MetadataGenerationError(UpstreamServiceError):
    """Raised when document title/description generation fails."""

    pass
