"""Infrastructure interface exports."""

from infrastructure.interfaces.extraction_service import ExtractionService
from infrastructure.interfaces.transcription_service import TranscriptionService

__all__ = ["ExtractionService", "TranscriptionService"]
