"""Pre-flight validation of uploaded voice clips."""

from config import UploadConfig
from exceptions import AudioValidationError, ValidationRule

from .models import AudioSubmission


class AudioIntakeValidator:
    """Rejects unusable uploads before any provider is called."""

    def __init__(self, config: UploadConfig):
        self._config = config

    def validate(self, submission: AudioSubmission | None) -> AudioSubmission:
        """
        Checks a submission against the intake rules in order.

        Args:
            submission: The uploaded clip, or None if no 'voice' field was sent.

        Returns:
            The same submission, once every rule passes.

        Raises:
            AudioValidationError: Naming the first rule that failed.
        """
        if submission is None:
            raise AudioValidationError(
                ValidationRule.NOT_PRESENT,
                "Voice audio file is required. "
                "Please upload a file with field name 'voice'.",
            )

        media_type = _media_type(submission.content_type)
        if media_type not in self._config.allowed_content_types:
            raise AudioValidationError(
                ValidationRule.BAD_TYPE,
                "Invalid file type. "
                "Only audio files (webm, wav, mp3, mpeg, ogg, mp4) are allowed",
            )

        if submission.size <= 0:
            raise AudioValidationError(
                ValidationRule.EMPTY, "Audio file cannot be empty"
            )

        if submission.size > self._config.max_size_bytes:
            raise AudioValidationError(
                ValidationRule.TOO_LARGE,
                f"Audio file size cannot exceed {self._max_size_label()}",
            )

        if submission.truncated:
            raise AudioValidationError(
                ValidationRule.TRUNCATED,
                "File upload was truncated. Please try again",
            )

        return submission

    def _max_size_label(self) -> str:
        limit = self._config.max_size_bytes
        for unit, factor in (("MB", 1024 * 1024), ("KB", 1024)):
            if limit >= factor and limit % factor == 0:
                return f"{limit // factor}{unit}"
        return f"{limit} bytes"


def _media_type(content_type: str | None) -> str | None:
    """Drops parameters such as `;codecs=opus` from a Content-Type value."""
    if content_type is None:
        return None
    return content_type.split(";", 1)[0].strip().lower()
