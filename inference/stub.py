from typing import Any, Dict

from .base import CompletionBackend
from .types import CompletionRequest

SIMULATED_FEEDBACK_TEXT = (
    "This is a simulated feedback response since the OpenAI API key is not configured."
)


def simulated_response() -> Dict[str, Any]:
    """Canned payload shaped like a chat completions response."""
    return {
        "choices": [
            {
                "message": {
                    "content": SIMULATED_FEEDBACK_TEXT,
                },
            }
        ],
    }


class StubCompletionBackend(CompletionBackend):
    """
    Completion backend used when no API key is configured.

    Deterministic, never touches the network, never fails.
    """

    async def complete(self, request: CompletionRequest) -> Dict[str, Any]:
        return simulated_response()
