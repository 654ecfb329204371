"""
Speech-to-Text service exports.

Clean interface for the HTTP layer to import STT components.
"""

from .base import (
    STTBackend,
    STTRequest,
    STTResponse,
    STTStatus,
    MISSING_KEY_TEXT,
    FALLBACK_TEXT,
)
from .stub import StubSTTBackend
from .openai_whisper import OpenAIWhisperSTTBackend

__all__ = [
    "STTBackend",
    "STTRequest",
    "STTResponse",
    "STTStatus",
    "MISSING_KEY_TEXT",
    "FALLBACK_TEXT",
    "StubSTTBackend",
    "OpenAIWhisperSTTBackend",
]
