"""
Speech-to-Text (STT) abstract interface.

Role: uploaded audio file → transcript text.

Rules:
- One upstream attempt, no retries
- Never raises: failures degrade to a fallback text (soft_fail)
- Does not own the audio file; the HTTP handler creates and deletes it
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any, Literal


STTStatus = Literal["success", "recoverable_error", "fatal_error"]

MISSING_KEY_TEXT = "OpenAI API key is not set. Using mock response instead."
FALLBACK_TEXT = "Error calling OpenAI API. Using mock response instead."


@dataclass
class STTRequest:
    """Speech-to-Text request."""

    audio_path: str  # Temp file owned by the request handler
    filename: Optional[str] = None  # Original upload name, sent upstream
    content_type: Optional[str] = None
    timeout_s: Optional[float] = None  # Backend default when None
    trace_id: Optional[str] = None


@dataclass
class STTResponse:
    """Speech-to-Text response. text is always populated."""

    status: STTStatus
    text: str
    error_type: Optional[str] = None  # timeout | upstream_error | backend_unavailable
    metadata: Optional[Dict[str, Any]] = None


class STTBackend(ABC):
    """
    Abstract STT boundary.
    HTTP handlers depend ONLY on this interface.
    """

    # Failures degrade to a placeholder transcript instead of failing the request
    soft_fail: bool = True

    @abstractmethod
    async def transcribe(self, request: STTRequest) -> STTResponse:
        """
        Transcribe an audio file.

        Args:
            request: STTRequest pointing at the uploaded audio

        Returns:
            STTResponse with the transcript, or fallback text and an error
            status on failure
        """
        raise NotImplementedError
