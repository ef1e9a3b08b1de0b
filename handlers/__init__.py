"""Handler exports."""

from handlers.voice_task_handler import VoiceTaskHandler

__all__ = ["VoiceTaskHandler"]
