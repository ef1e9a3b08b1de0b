"""Response models for the voice-task API."""

from pydantic import BaseModel

from domain.models import VoiceTaskResponse


class FieldError(BaseModel):
    path: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope shared by every failing endpoint."""

    success: bool = False
    message: str
    errors: list[FieldError] | None = None


class HealthResponse(BaseModel):
    success: bool = True
    message: str


__all__ = ["ErrorResponse", "FieldError", "HealthResponse", "VoiceTaskResponse"]
