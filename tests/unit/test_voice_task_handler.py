import pytest

from config import MAX_AUDIO_SIZE_BYTES
from domain import TaskDraft, TranscriptResult
from exceptions import (
    AudioValidationError,
    ExtractionError,
    TranscriptionError,
    ValidationRule,
)

pytestmark = pytest.mark.anyio


@pytest.mark.parametrize(
    ("overrides", "rule"),
    [
        ({"content_type": "video/mp4"}, ValidationRule.BAD_TYPE),
        ({"payload": b""}, ValidationRule.EMPTY),
        ({"size": MAX_AUDIO_SIZE_BYTES + 1}, ValidationRule.TOO_LARGE),
        ({"truncated": True}, ValidationRule.TRUNCATED),
    ],
)
async def test_invalid_audio_makes_no_provider_calls(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
    overrides,
    rule,
):
    with pytest.raises(AudioValidationError) as exc_info:
        await voice_task_handler.process(make_submission(**overrides))

    assert exc_info.value.rule is rule
    transcription_service_mock.transcribe.assert_not_awaited()
    extraction_service_mock.extract.assert_not_awaited()


async def test_missing_audio_makes_no_provider_calls(
    voice_task_handler, transcription_service_mock
):
    with pytest.raises(AudioValidationError) as exc_info:
        await voice_task_handler.process(None)

    assert exc_info.value.rule is ValidationRule.NOT_PRESENT
    transcription_service_mock.transcribe.assert_not_awaited()


async def test_transcription_failure_skips_extraction(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
):
    transcription_service_mock.transcribe.side_effect = TranscriptionError(
        "note.wav", ConnectionError("connection reset")
    )

    with pytest.raises(TranscriptionError):
        await voice_task_handler.process(make_submission())

    extraction_service_mock.extract.assert_not_awaited()


async def test_extraction_failure_aborts(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
):
    transcription_service_mock.transcribe.return_value = TranscriptResult(
        text="Buy groceries"
    )
    extraction_service_mock.extract.side_effect = ExtractionError("quota exceeded")

    with pytest.raises(ExtractionError):
        await voice_task_handler.process(make_submission())


async def test_audio_is_forwarded_to_transcription(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
):
    transcription_service_mock.transcribe.return_value = TranscriptResult(text="x")
    extraction_service_mock.extract.return_value = '{"title":"x"}'
    submission = make_submission(
        payload=b"OggS-data", content_type="audio/ogg", filename="memo.ogg"
    )

    await voice_task_handler.process(submission)

    transcription_service_mock.transcribe.assert_awaited_once_with(
        b"OggS-data", "memo.ogg", "audio/ogg"
    )


async def test_relative_date_resolves_against_reference_time(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
):
    transcription_service_mock.transcribe.return_value = TranscriptResult(
        text="remind me tomorrow"
    )
    extraction_service_mock.extract.return_value = (
        '{"title":"Reminder","description":"","status":"TODO",'
        '"priority":"MEDIUM","due_date":"2025-01-11"}'
    )

    response = await voice_task_handler.process(make_submission())

    (prompt,) = extraction_service_mock.extract.await_args.args
    assert '"2025-01-10 09:30:00"' in prompt
    assert "remind me tomorrow" in prompt
    assert response.data.due_date == "2025-01-11"


async def test_draft_without_date_or_status(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
):
    transcription_service_mock.transcribe.return_value = TranscriptResult(
        text="Buy groceries"
    )
    extraction_service_mock.extract.return_value = (
        '{"title":"Buy groceries","description":"","status":"TODO",'
        '"priority":"MEDIUM","due_date":null}'
    )

    response = await voice_task_handler.process(make_submission())

    assert response.success is True
    assert response.transcript == "Buy groceries"
    assert response.data.due_date is None
    assert response.data.status == "TODO"


async def test_malformed_extraction_uses_fallback(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
):
    transcript = "Buy milk tomorrow morning"
    transcription_service_mock.transcribe.return_value = TranscriptResult(
        text=transcript
    )
    extraction_service_mock.extract.return_value = (
        "Sure, here is the task: {title: Buy milk"
    )

    response = await voice_task_handler.process(make_submission())

    assert response.success is True
    assert response.data == TaskDraft(
        title=transcript[:100],
        description=transcript,
        status="TODO",
        priority="MEDIUM",
        due_date=None,
    )


async def test_empty_transcript_still_produces_a_draft(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
):
    transcription_service_mock.transcribe.return_value = TranscriptResult()
    extraction_service_mock.extract.return_value = "I could not find a task."

    response = await voice_task_handler.process(make_submission())

    assert response.transcript == ""
    assert response.data.title == ""
    assert response.data.priority == "MEDIUM"


async def test_response_serializes_every_draft_field(
    voice_task_handler,
    transcription_service_mock,
    extraction_service_mock,
    make_submission,
):
    transcription_service_mock.transcribe.return_value = TranscriptResult(text="x")
    extraction_service_mock.extract.return_value = '{"title":"x"}'

    response = await voice_task_handler.process(make_submission())

    assert response.model_dump() == {
        "success": True,
        "transcript": "x",
        "data": {
            "title": "x",
            "description": None,
            "status": None,
            "priority": None,
            "due_date": None,
        },
    }
