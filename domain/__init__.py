"""Domain layer exports."""

from domain.audio_validator import AudioIntakeValidator
from domain.draft_parser import DraftParser, strip_code_fences
from domain.fallback_extractor import FallbackExtractor
from domain.models import (
    AudioSubmission,
    PipelineStage,
    TaskCreate,
    TaskDraft,
    TaskPriority,
    TaskStatus,
    TranscriptResult,
    VoiceTaskResponse,
)
from domain.prompt_builder import ExtractionPromptBuilder
from domain.response_assembler import ResponseAssembler

__all__ = [
    "AudioIntakeValidator",
    "AudioSubmission",
    "DraftParser",
    "ExtractionPromptBuilder",
    "FallbackExtractor",
    "PipelineStage",
    "ResponseAssembler",
    "TaskCreate",
    "TaskDraft",
    "TaskPriority",
    "TaskStatus",
    "TranscriptResult",
    "VoiceTaskResponse",
    "strip_code_fences",
]
