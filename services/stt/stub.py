"""
Stub STT backend for running without an API key.

Deterministic, no network.
"""

from .base import STTBackend, STTRequest, STTResponse, MISSING_KEY_TEXT


class StubSTTBackend(STTBackend):
    """Returns the "key not set" placeholder for every upload."""

    async def transcribe(self, request: STTRequest) -> STTResponse:
        return STTResponse(
            status="recoverable_error",
            text=MISSING_KEY_TEXT,
            error_type="backend_unavailable",
            metadata={
                "backend": "stub_stt",
                "trace_id": request.trace_id,
                "reason": "API key not configured",
            },
        )
