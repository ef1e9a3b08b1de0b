"""Prompt construction for task extraction."""

from datetime import datetime

_PROMPT_TEMPLATE = """You are a task parser. Parse the following voice transcript and extract task information.

Transcript: "{transcript}"

Current date and time: "{reference_time}"

Extract and return ONLY a valid JSON object (no markdown, no code blocks) with the following structure:
{{
  "title": "brief task title (max 100 chars)",
  "description": "detailed description if available, otherwise leave empty string",
  "status": "TODO or IN_PROGRESS or DONE",
  "priority": "LOW or MEDIUM or HIGH",
  "due_date": "YYYY-MM-DD format if date/time"
}}

Rules:
- If no specific status is mentioned, use "TODO"
- If no priority is mentioned, use "MEDIUM"
- Parse relative dates like "tomorrow", "next Monday", "in 3 days" using the current date/time provided above
- Parse absolute dates like "January 15", "Dec 25th" into YYYY-MM-DD format
- If any date or time reference is mentioned (relative or absolute), calculate and include due_date
- If no date/time is mentioned at all, set due_date to null
- Return ONLY the JSON object, nothing else"""

REFERENCE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class ExtractionPromptBuilder:
    """Builds the extraction prompt from a transcript and a fixed timestamp."""

    def build(self, transcript: str, reference_time: datetime) -> str:
        """
        Args:
            transcript: Text returned by the speech-to-text provider.
            reference_time: Request time that relative dates resolve against.

        Returns:
            The prompt to send to the extraction model.
        """
        return _PROMPT_TEMPLATE.format(
            transcript=transcript,
            reference_time=reference_time.strftime(REFERENCE_TIME_FORMAT),
        )
