"""Voice-to-task endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from taskboard_common.logging import setup_logging

from config import AppConfig
from dependencies import get_config, get_voice_task_handler
from domain import AudioSubmission, VoiceTaskResponse
from exceptions import AudioValidationError, UpstreamServiceError, ValidationRule
from handlers import VoiceTaskHandler
from response_models import ErrorResponse

logger = setup_logging()

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
HandlerDep = Annotated[VoiceTaskHandler, Depends(get_voice_task_handler)]

_STATUS_BY_RULE = {ValidationRule.TOO_LARGE: 413}


async def _read_submission(
    voice: UploadFile | None, max_size_bytes: int
) -> AudioSubmission | None:
    """
    Builds a submission from the spooled upload.

    Starlette has already spooled the whole part; only up to one byte past the
    limit is loaded into memory. `truncated` marks a spool that holds fewer
    bytes than its recorded size.
    """
    if voice is None:
        return None

    payload = await voice.read(max_size_bytes + 1)
    declared_size = voice.size if voice.size is not None else len(payload)

    return AudioSubmission(
        payload=payload,
        content_type=voice.content_type,
        filename=voice.filename,
        size=declared_size,
        truncated=declared_size <= max_size_bytes and len(payload) < declared_size,
    )


@router.post(
    "/voice",
    response_model=VoiceTaskResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_task_from_voice(
    config: ConfigDep,
    handler: HandlerDep,
    voice: Annotated[UploadFile | None, File()] = None,
) -> VoiceTaskResponse:
    """
    Transcribes a voice clip and proposes a task from it.

    The draft is not saved; the caller submits it to the task endpoint
    once the user confirms it.
    """
    submission = await _read_submission(voice, config.upload.max_size_bytes)

    logger.info(
        "Received voice upload",
        extra={
            "file_name": submission.filename if submission else None,
            "content_type": submission.content_type if submission else None,
            "size": submission.size if submission else None,
        },
    )

    try:
        return await handler.process(submission)
    except AudioValidationError as e:
        raise HTTPException(
            status_code=_STATUS_BY_RULE.get(e.rule, 400), detail=e.message
        )
    except UpstreamServiceError:
        raise HTTPException(status_code=500, detail="Failed to transcribe audio")
