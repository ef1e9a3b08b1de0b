"""Infrastructure layer exports."""

from infrastructure.elevenlabs_transcriber import ElevenLabsTranscriber
from infrastructure.gemini_extractor import GeminiExtractionService

__all__ = ["ElevenLabsTranscriber", "GeminiExtractionService"]
