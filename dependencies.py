"""FastAPI dependency injection configuration."""

import httpx
from fastapi import Request
from google import genai

from config import AppConfig
from domain import (
    AudioIntakeValidator,
    DraftParser,
    ExtractionPromptBuilder,
    FallbackExtractor,
    ResponseAssembler,
)
from handlers import VoiceTaskHandler
from infrastructure import ElevenLabsTranscriber, GeminiExtractionService


def build_voice_task_handler(
    config: AppConfig,
    http_client: httpx.AsyncClient,
    gemini_client: genai.Client,
) -> VoiceTaskHandler:
    """Composes the voice pipeline around long-lived provider clients."""
    return VoiceTaskHandler(
        validator=AudioIntakeValidator(config.upload),
        transcription_service=ElevenLabsTranscriber(http_client, config.elevenlabs),
        prompt_builder=ExtractionPromptBuilder(),
        extraction_service=GeminiExtractionService(
            gemini_client, config.gemini.model_name
        ),
        draft_parser=DraftParser(FallbackExtractor()),
        assembler=ResponseAssembler(),
    )


def get_config(request: Request) -> AppConfig:
    """Returns the configuration loaded at startup."""
    return request.app.state.config


def get_voice_task_handler(request: Request) -> VoiceTaskHandler:
    """Returns the handler created in the application lifespan."""
    return request.app.state.voice_task_handler
