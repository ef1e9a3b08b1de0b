"""Model-free draft derivation."""

from .models import TaskDraft, TaskPriority, TaskStatus

FALLBACK_TITLE_LENGTH = 100


class FallbackExtractor:
    """Builds a conservative draft straight from the transcript."""

    def extract(self, transcript: str) -> TaskDraft:
        return TaskDraft(
            title=transcript[:FALLBACK_TITLE_LENGTH],
            description=transcript,
            status=TaskStatus.TODO.value,
            priority=TaskPriority.MEDIUM.value,
            due_date=None,
        )
