"""Gemini LLM extraction service implementation."""

from google import genai
from taskboard_common.logging import setup_logging

from exceptions import ExtractionError
from infrastructure.interfaces import ExtractionService

logger = setup_logging()


class GeminiExtractionService(ExtractionService):
    """LLM extraction implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    async def extract(self, prompt: str) -> str:
        """
        Runs the extraction prompt through Gemini.

        Args:
            prompt: The extraction prompt.

        Returns:
            The raw text output of the model.

        Raises:
            ExtractionError: If the Gemini API call fails or yields no text.
        """
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=prompt,
            )
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise ExtractionError(f"Gemini extraction failed: {e}", cause=e) from e

        text = _response_text(response)
        if not text:
            logger.error("Gemini returned empty response")
            raise ExtractionError("Gemini returned empty response")

        logger.info("LLM extraction completed", extra={"output_length": len(text)})
        return text


def _response_text(response) -> str:
    """Reads the top-level text, else the text parts of the first candidate."""
    text = getattr(response, "text", None)
    if text:
        return text

    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        parts = getattr(content, "parts", None) or []
        joined = "".join(part.text for part in parts if getattr(part, "text", None))
        if joined:
            return joined
    return ""
