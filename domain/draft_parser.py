"""Best-effort parsing of extraction model output."""

import re

from pydantic import ValidationError
from taskboard_common.logging import setup_logging

from .fallback_extractor import FallbackExtractor
from .models import TaskDraft

logger = setup_logging()

_CODE_FENCE = re.compile(r"```(?:json)?\n?")


def strip_code_fences(text: str) -> str:
    """Removes ``` and ```json markers and surrounding whitespace."""
    return _CODE_FENCE.sub("", text).strip()


class DraftParser:
    """Turns raw model output into a TaskDraft, degrading to the fallback."""

    def __init__(self, fallback: FallbackExtractor):
        self._fallback = fallback

    def try_parse(self, raw_output: str) -> TaskDraft | None:
        """
        Parses model output as a JSON task object.

        Returns:
            The draft, or None if the output is not a JSON object of the
            expected shape.
        """
        try:
            return TaskDraft.model_validate_json(strip_code_fences(raw_output))
        except ValidationError as e:
            logger.warning(
                "Extraction output is not a valid task object",
                extra={"error_count": e.error_count()},
            )
            return None

    def fallback(self, transcript: str) -> TaskDraft:
        logger.info(
            "Using fallback draft",
            extra={"transcript_length": len(transcript)},
        )
        return self._fallback.extract(transcript)

    def parse(self, raw_output: str, transcript: str) -> TaskDraft:
        """
        Parses model output, falling back to a transcript-derived draft.

        Args:
            raw_output: Text returned by the extraction model.
            transcript: Transcript the fallback draft is built from.

        Returns:
            The parsed draft, or the fallback draft when parsing fails.
        """
        draft = self.try_parse(raw_output)
        if draft is None:
            return self.fallback(transcript)
        return draft
