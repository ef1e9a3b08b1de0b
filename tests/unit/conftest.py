from datetime import datetime
from unittest import mock

import pytest

from config import UploadConfig
from domain import (
    AudioIntakeValidator,
    AudioSubmission,
    DraftParser,
    ExtractionPromptBuilder,
    FallbackExtractor,
    ResponseAssembler,
)
from handlers import VoiceTaskHandler
from infrastructure.interfaces import ExtractionService, TranscriptionService
from tests.unit import factories

REFERENCE_TIME = datetime(2025, 1, 10, 9, 30, 0)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def upload_config() -> UploadConfig:
    return UploadConfig()


@pytest.fixture
def transcription_service_mock() -> mock.AsyncMock:
    return mock.AsyncMock(spec=TranscriptionService)


@pytest.fixture
def extraction_service_mock() -> mock.AsyncMock:
    return mock.AsyncMock(spec=ExtractionService)


@pytest.fixture
def voice_task_handler(
    upload_config, transcription_service_mock, extraction_service_mock
) -> VoiceTaskHandler:
    return VoiceTaskHandler(
        validator=AudioIntakeValidator(upload_config),
        transcription_service=transcription_service_mock,
        prompt_builder=ExtractionPromptBuilder(),
        extraction_service=extraction_service_mock,
        draft_parser=DraftParser(FallbackExtractor()),
        assembler=ResponseAssembler(),
        clock=lambda: REFERENCE_TIME,
    )


@pytest.fixture
def make_submission():
    def _make(
        payload: bytes = b"RIFF....WAVEfmt ",
        content_type: str | None = "audio/wav",
        filename: str | None = "note.wav",
        size: int | None = None,
        truncated: bool = False,
    ) -> AudioSubmission:
        return AudioSubmission(
            payload=payload,
            content_type=content_type,
            filename=filename,
            size=len(payload) if size is None else size,
            truncated=truncated,
        )

    return _make


@pytest.fixture
def task_draft_factory() -> type[factories.TaskDraftFactory]:
    return factories.TaskDraftFactory
