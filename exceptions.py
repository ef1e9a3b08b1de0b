"""Custom exceptions for the voice-task service."""

from enum import Enum


class ValidationRule(str, Enum):
    """Audio intake rules, in the order they are checked."""

    NOT_PRESENT = "not_present"
    BAD_TYPE = "bad_type"
    EMPTY = "empty"
    TOO_LARGE = "too_large"
    TRUNCATED = "truncated"


class AudioValidationError(Exception):
    """Raised when an uploaded voice clip fails an intake rule."""

    def __init__(self, rule: ValidationRule, message: str):
        self.rule = rule
        self.message = message
        super().__init__(message)


class UpstreamServiceError(Exception):
    """Base class for failures of an external provider call."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class TranscriptionError(UpstreamServiceError):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        super().__init__(f"Failed to transcribe audio file '{file_name}'", cause)


class ExtractionError(UpstreamServiceError):
    """Raised when the LLM extraction call fails or returns no text."""
