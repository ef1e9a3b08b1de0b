"""Domain models for the voice-to-task pipeline."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class PipelineStage(str, Enum):
    """States a voice request moves through."""

    VALIDATING = "validating"
    TRANSCRIBING = "transcribing"
    BUILDING_PROMPT = "building_prompt"
    EXTRACTING = "extracting"
    PARSING = "parsing"
    PARSED = "parsed"
    FALLBACK = "fallback"
    ASSEMBLED = "assembled"
    ABORTED = "aborted"


class AudioSubmission(BaseModel, frozen=True):
    """An uploaded voice clip, scoped to a single request."""

    payload: bytes
    content_type: str | None = None
    filename: str | None = None
    size: int
    truncated: bool = False


class TranscriptResult(BaseModel, frozen=True):
    """Plain transcript text returned by the speech-to-text provider."""

    text: str = ""


class TaskDraft(BaseModel):
    """
    Proposed task fields extracted from a transcript.

    Values are kept exactly as the model produced them. Enum membership and
    date format are checked later by TaskCreate, before persistence.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    due_date: str | None = None


class TaskCreate(BaseModel):
    """Task payload accepted by the task-creation endpoint."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: date | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("description", mode="before")
    @classmethod
    def _strip_description(cls, value):
        if isinstance(value, str):
            return value.strip() or None
        return value

    @classmethod
    def from_draft(cls, draft: TaskDraft) -> "TaskCreate":
        """
        Re-validates a draft before it is submitted for persistence.

        Missing status and priority take the task defaults; an empty
        description or due date becomes None.

        Raises:
            pydantic.ValidationError: If the draft cannot become a task.
        """
        values = draft.model_dump(exclude_none=True)
        if not values.get("due_date"):
            values.pop("due_date", None)
        return cls.model_validate(values)


class VoiceTaskResponse(BaseModel):
    """Transcript and proposed task returned for a voice upload."""

    success: bool = True
    transcript: str
    data: TaskDraft
