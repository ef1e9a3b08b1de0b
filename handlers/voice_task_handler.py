"""Handler for turning a voice clip into a task draft."""

from datetime import datetime
from typing import Callable

from taskboard_common.logging import setup_logging

from domain import (
    AudioIntakeValidator,
    AudioSubmission,
    DraftParser,
    ExtractionPromptBuilder,
    PipelineStage,
    ResponseAssembler,
    VoiceTaskResponse,
)
from exceptions import AudioValidationError, UpstreamServiceError
from infrastructure.interfaces import ExtractionService, TranscriptionService

logger = setup_logging()


class VoiceTaskHandler:
    """Orchestrates validation, transcription, extraction and parsing."""

    def __init__(
        self,
        validator: AudioIntakeValidator,
        transcription_service: TranscriptionService,
        prompt_builder: ExtractionPromptBuilder,
        extraction_service: ExtractionService,
        draft_parser: DraftParser,
        assembler: ResponseAssembler,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._validator = validator
        self._transcription_service = transcription_service
        self._prompt_builder = prompt_builder
        self._extraction_service = extraction_service
        self._draft_parser = draft_parser
        self._assembler = assembler
        self._clock = clock

    async def process(self, submission: AudioSubmission | None) -> VoiceTaskResponse:
        """
        Runs one voice clip through the whole pipeline.

        Args:
            submission: The uploaded clip, or None when no clip was sent.

        Returns:
            VoiceTaskResponse with the transcript and the proposed task.

        Raises:
            AudioValidationError: If the clip fails an intake rule.
            TranscriptionError: If the speech-to-text call fails.
            ExtractionError: If the LLM call fails.
        """
        reference_time = self._clock()

        stage = self._enter(PipelineStage.VALIDATING)
        try:
            audio = self._validator.validate(submission)
        except AudioValidationError as e:
            self._abort(stage, rule=e.rule.value)
            raise

        filename = audio.filename or "voice"
        try:
            stage = self._enter(PipelineStage.TRANSCRIBING, file_name=filename)
            transcript = await self._transcription_service.transcribe(
                audio.payload, filename, audio.content_type
            )

            stage = self._enter(PipelineStage.BUILDING_PROMPT)
            prompt = self._prompt_builder.build(transcript.text, reference_time)

            stage = self._enter(PipelineStage.EXTRACTING)
            raw_output = await self._extraction_service.extract(prompt)
        except UpstreamServiceError as e:
            self._abort(stage, error=type(e).__name__)
            raise

        self._enter(PipelineStage.PARSING)
        draft = self._draft_parser.try_parse(raw_output)
        if draft is None:
            self._enter(PipelineStage.FALLBACK)
            draft = self._draft_parser.fallback(transcript.text)
        else:
            self._enter(PipelineStage.PARSED)

        response = self._assembler.assemble(transcript, draft)
        self._enter(PipelineStage.ASSEMBLED, file_name=filename)
        return response

    def _enter(self, stage: PipelineStage, **extra) -> PipelineStage:
        logger.info("Voice pipeline stage", extra={"stage": stage.value, **extra})
        return stage

    def _abort(self, failed_at: PipelineStage, **extra) -> None:
        logger.warning(
            "Voice pipeline aborted",
            extra={
                "stage": PipelineStage.ABORTED.value,
                "failed_at": failed_at.value,
                **extra,
            },
        )
