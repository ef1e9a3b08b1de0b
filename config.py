"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

MAX_AUDIO_SIZE_BYTES = 10 * 1024 * 1024

ALLOWED_AUDIO_CONTENT_TYPES = frozenset(
    {
        "audio/webm",
        "audio/wav",
        "audio/mp3",
        "audio/mpeg",
        "audio/ogg",
        "audio/mp4",
    }
)


class ElevenLabsConfig(BaseModel, frozen=True):
    """ElevenLabs speech-to-text API configuration."""

    api_key: str
    base_url: str = "https://api.elevenlabs.io"
    model_id: str = "scribe_v1"
    language_code: str = "eng"
    diarize: bool = True
    tag_audio_events: bool = True
    timeout_seconds: float = 60.0


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"


class UploadConfig(BaseModel, frozen=True):
    """Constraints applied to uploaded voice clips."""

    max_size_bytes: int = MAX_AUDIO_SIZE_BYTES
    allowed_content_types: frozenset[str] = ALLOWED_AUDIO_CONTENT_TYPES


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    elevenlabs: ElevenLabsConfig
    gemini: GeminiConfig
    upload: UploadConfig = UploadConfig()
    log_level: str = "INFO"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        elevenlabs=ElevenLabsConfig(
            api_key=os.getenv("ELEVENLABS_API_KEY", ""),
            base_url=os.getenv("ELEVENLABS_BASE_URL", "https://api.elevenlabs.io"),
            model_id=os.getenv("ELEVENLABS_MODEL_ID", "scribe_v1"),
            timeout_seconds=float(os.getenv("ELEVENLABS_TIMEOUT_SECONDS", "60")),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash-lite"),
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
