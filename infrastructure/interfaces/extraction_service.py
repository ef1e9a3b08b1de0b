"""Abstract interface for LLM extraction operations."""

from abc import ABC, abstractmethod


class ExtractionService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    async def extract(self, prompt: str) -> str:
        """
        Sends a prompt to the model and returns its raw text output.

        Args:
            prompt: The extraction prompt.

        Returns:
            The model output, expected but not guaranteed to be a JSON object.

        Raises:
            ExtractionError: If the LLM call fails or returns no text.
        """
        pass
