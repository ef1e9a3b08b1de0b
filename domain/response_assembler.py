"""Assembly of the pipeline output."""

from .models import TaskDraft, TranscriptResult, VoiceTaskResponse


class ResponseAssembler:
    """Combines the transcript and the draft into the response body."""

    def assemble(
        self, transcript: TranscriptResult, draft: TaskDraft
    ) -> VoiceTaskResponse:
        return VoiceTaskResponse(transcript=transcript.text, data=draft)
