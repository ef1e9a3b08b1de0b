"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from domain.models import TranscriptResult


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    async def transcribe(
        self, audio_data: bytes, filename: str, content_type: str
    ) -> TranscriptResult:
        """
        Transcribes a whole audio clip.

        Args:
            audio_data: Raw audio file bytes.
            filename: Original name of the uploaded file.
            content_type: MIME type of the audio.

        Returns:
            TranscriptResult holding the transcript text.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
