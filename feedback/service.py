"""
Feedback pipeline orchestration.

validate -> build prompt -> budget -> one completion call.
"""

import logging
from typing import Any, Dict, Optional

from inference import CompletionBackend, CompletionRequest

from .budget import compute_budget
from .prompt_builder import build_prompt
from .types import FeedbackRequest
from .validation import validate_transcript

logger = logging.getLogger(__name__)

TEMPERATURE: float = 0.1


class FeedbackService:
    """
    Runs one feedback request end to end.

    Raises ValidationError before any prompt is built, and lets GatewayError
    from the backend propagate to the HTTP layer.
    """

    def __init__(self, backend: CompletionBackend):
        self.backend = backend

    async def generate(
        self,
        request: FeedbackRequest,
        trace_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        stats = validate_transcript(request.transcript)
        logger.info(
            f"Transcription word count: {stats.word_count}, unique words: {stats.unique_word_count}",
            extra={"trace_id": trace_id},
        )
        logger.info(
            f"Processing feedback (type={request.mode.value}) for question: {request.question}",
            extra={"trace_id": trace_id},
        )

        prompt_spec = build_prompt(request)
        budget = compute_budget(prompt_spec)
        logger.info(
            f"Using model: {budget.model}, estimated input tokens: "
            f"~{prompt_spec.estimated_input_tokens}, max output tokens: {budget.max_output_tokens}",
            extra={"trace_id": trace_id},
        )

        completion_request = CompletionRequest(
            model=budget.model,
            system_role=prompt_spec.system_role,
            user_prompt=prompt_spec.user_prompt,
            max_tokens=budget.max_output_tokens,
            temperature=TEMPERATURE,
            trace_id=trace_id,
        )
        return await self.backend.complete(completion_request)
