"""
Feedback pipeline.

Transcript validation, prompt construction and output-token budgeting for the
completion call that produces the interview feedback report.

Example usage:
    from feedback import FeedbackRequest, FeedbackMode, validate_transcript, build_prompt, compute_budget

    request = FeedbackRequest(question="Tell me about a time...", transcript=text, mode=FeedbackMode.STANDARD)
    validate_transcript(request.transcript)
    spec = build_prompt(request)
    budget = compute_budget(spec)
"""

from .types import FeedbackMode, FeedbackRequest, PromptSpec, CompletionBudget
from .validation import ValidationError, TranscriptStats, validate_transcript
from .prompt_builder import build_prompt, estimate_tokens
from .budget import compute_budget
from .service import FeedbackService

__all__ = [
    "FeedbackMode",
    "FeedbackRequest",
    "PromptSpec",
    "CompletionBudget",
    "ValidationError",
    "TranscriptStats",
    "validate_transcript",
    "build_prompt",
    "estimate_tokens",
    "compute_budget",
    "FeedbackService",
]
