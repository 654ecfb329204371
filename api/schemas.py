"""
HTTP request schemas.

PURE DATA MODELS - NO LOGIC
Field names match what the practice UI sends.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class FeedbackPayload(BaseModel):
    """Body of POST /feedback."""

    transcription: Optional[str] = Field(
        None,
        description="Candidate answer text. Required; checked by the handler so the 400 body stays {error}."
    )
    question: Optional[str] = Field(None, description="Interview question being answered")
    feedbackType: Optional[Any] = Field(
        None,
        description='"amazon_pm" for the PM report; any other value, of any type, gets the standard report'
    )
