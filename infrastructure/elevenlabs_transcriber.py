"""ElevenLabs implementation of the TranscriptionService interface."""

import httpx
from taskboard_common.logging import setup_logging

from config import ElevenLabsConfig
from domain.models import TranscriptResult
from exceptions import TranscriptionError
from infrastructure.interfaces import TranscriptionService

logger = setup_logging()


class ElevenLabsTranscriber(TranscriptionService):
    """Handles audio transcription using the ElevenLabs speech-to-text API."""

    def __init__(self, http_client: httpx.AsyncClient, config: ElevenLabsConfig):
        self._http_client = http_client
        self._config = config

    async def transcribe(
        self, audio_data: bytes, filename: str, content_type: str
    ) -> TranscriptResult:
        """
        Posts the clip as multipart form data and reads the `text` field.

        A response without text yields an empty transcript, not an error.
        """
        try:
            response = await self._http_client.post(
                f"{self._config.base_url}/v1/speech-to-text",
                headers={"xi-api-key": self._config.api_key},
                data=self._form_fields(),
                files={"file": (filename, audio_data, content_type)},
                timeout=self._config.timeout_seconds,
            )
            response.raise_for_status()
            text = _transcript_text(response.json())
        except Exception as e:
            logger.exception(
                "ElevenLabs transcription failed",
                extra={"file_name": filename},
            )
            raise TranscriptionError(filename, e) from e

        logger.info(
            "Audio transcription successful",
            extra={"file_name": filename, "transcript_length": len(text or "")},
        )
        return TranscriptResult(text=text or "")

    def _form_fields(self) -> dict[str, str]:
        return {
            "model_id": self._config.model_id,
            "language_code": self._config.language_code,
            "diarize": str(self._config.diarize).lower(),
            "tag_audio_events": str(self._config.tag_audio_events).lower(),
        }


def _transcript_text(body) -> str | None:
    """Reads `text` from the response body; absent means no speech."""
    text = body.get("text") if isinstance(body, dict) else None
    if text is not None and not isinstance(text, str):
        raise TypeError(f"Expected transcript text, got {type(text).__name__}")
    return text
