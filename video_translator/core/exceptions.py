"""
Exception hierarchy for the video translator.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class VideoTranslatorException(Exception):
    """Base exception for all video translator errors."""

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


class FileValidationError(VideoTranslatorException):
    """Raised when a submitted file is rejected before any job exists."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        file_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize file validation error.

        Args:
            message: User-facing rejection message
            field: Attribute that failed validation (content_type, size)
            file_name: Name of the rejected file
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        if file_name:
            details["file_name"] = file_name
        super().__init__(message, details)


class JobNotFoundError(VideoTranslatorException):
    """Raised when a job cannot be found."""

    def __init__(self, job_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["job_id"] = str(job_id)
        super().__init__(f"Job not found: {job_id}", details)


class InvalidTransitionError(VideoTranslatorException):
    """Raised when a job update would break the lifecycle ordering."""

    def __init__(
        self,
        current: str,
        requested: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details.update({"current": current, "requested": requested})
        super().__init__(f"Invalid job transition: {current} -> {requested}", details)


class ProcessingError(VideoTranslatorException):
    """Base exception for processing backend failures."""

    def __init__(
        self,
        message: str,
        job_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize processing error.

        Args:
            message: Error message persisted on the job
            job_id: ID of the job being processed
            details: Additional context
        """
        details = details or {}
        if job_id:
            details["job_id"] = job_id
        super().__init__(message, details)


class AudioExtractionError(ProcessingError):
    """Raised when ffmpeg cannot produce an audio track."""

    pass


class ProviderError(ProcessingError):
    """Raised when an external AI provider call fails."""

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        job_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            provider: Provider name (openai, google_translate, elevenlabs)
            status_code: HTTP status returned by the provider, if any
            job_id: ID of the job being processed
            details: Additional context
        """
        details = details or {}
        details["provider"] = provider
        if status_code is not None:
            details["status_code"] = status_code
        self.provider = provider
        self.status_code = status_code
        super().__init__(message, job_id, details)


class TranscriptionError(ProviderError):
    """Raised when speech recognition fails."""

    pass


class TranslationError(ProviderError):
    """Raised when machine translation fails."""

    pass


class SynthesisError(ProviderError):
    """Raised when speech synthesis fails."""

    pass


class StorageError(VideoTranslatorException):
    """Raised when object storage operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (upload, download, delete)
            key: Object key involved
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if key:
            details["key"] = key
        super().__init__(message, details)


class PersistenceError(VideoTranslatorException):
    """Raised when the job record cannot be read or written."""

    pass


class ConfigurationError(VideoTranslatorException):
    """Raised when required configuration is missing at startup."""

    def __init__(self, missing: list[str], details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["missing"] = missing
        self.missing = missing
        super().__init__(
            f"Missing required environment variables: {', '.join(missing)}",
            details,
        )


class RequestParseError(VideoTranslatorException):
    """Raised when a function request body cannot be parsed."""

    pass
