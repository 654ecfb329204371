"""
Model boundary layer for the feedback completion call.

Supported backends:
- StubCompletionBackend: canned simulated response (no API key configured)
- OpenAICompletionBackend: OpenAI-compatible /chat/completions over httpx

Example usage:
    from inference import OpenAICompletionBackend, CompletionRequest

    backend = OpenAICompletionBackend(api_key="sk-...")
    request = CompletionRequest(model="gpt-4", system_role="...", user_prompt="...", max_tokens=4000)
    payload = await backend.complete(request)
"""

from .types import CompletionRequest, GatewayError, GatewayErrorKind
from .base import CompletionBackend
from .stub import StubCompletionBackend, simulated_response, SIMULATED_FEEDBACK_TEXT
from .openai_chat import OpenAICompletionBackend

__all__ = [
    "CompletionRequest",
    "GatewayError",
    "GatewayErrorKind",
    "CompletionBackend",
    "StubCompletionBackend",
    "simulated_response",
    "SIMULATED_FEEDBACK_TEXT",
    "OpenAICompletionBackend",
]
