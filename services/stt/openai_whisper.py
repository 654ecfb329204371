"""
Hosted Whisper STT backend (OpenAI /audio/transcriptions).

Streams the uploaded file as multipart form content together with the model
identifier. Requires an API key; without one the stub backend is used.
"""

import logging
import os

import httpx

from .base import STTBackend, STTRequest, STTResponse, FALLBACK_TEXT

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "whisper-1"
DEFAULT_TIMEOUT_S = 60.0


class OpenAIWhisperSTTBackend(STTBackend):
    """
    OpenAI transcription API over httpx.

    Guarantees:
    - Never raises (returns FALLBACK_TEXT on any failure)
    - API key never logged
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model_name: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_S,
    ):
        """
        Args:
            api_key:    Bearer token for the provider
            base_url:   API root, e.g. "https://api.openai.com/v1"
            model_name: Transcription model identifier
            timeout:    Seconds before the upload is abandoned
        """
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model_name = model_name
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/audio/transcriptions"

    def _fallback(self, request: STTRequest, error_type: str, error: Exception) -> STTResponse:
        return STTResponse(
            status="recoverable_error" if error_type == "timeout" else "fatal_error",
            text=FALLBACK_TEXT,
            error_type=error_type,
            metadata={
                "backend": "openai_whisper",
                "model": self.model_name,
                "error": str(error),
                "trace_id": request.trace_id,
            },
        )

    async def transcribe(self, request: STTRequest) -> STTResponse:
        filename = request.filename or os.path.basename(request.audio_path)
        timeout = request.timeout_s or self.timeout

        try:
            logger.info(
                "Sending audio to transcription API",
                extra={"trace_id": request.trace_id, "model": self.model_name},
            )
            # Blocking open and chunked multipart reads run on the event loop;
            # uploads are short voice answers, so the stalls stay small.
            with open(request.audio_path, "rb") as audio_file:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    response = await client.post(
                        self.endpoint,
                        headers={"Authorization": f"Bearer {self._api_key}"},
                        data={"model": self.model_name},
                        files={
                            "file": (
                                filename,
                                audio_file,
                                request.content_type or "application/octet-stream",
                            )
                        },
                    )
            response.raise_for_status()
            text = response.json().get("text", "")

        except httpx.TimeoutException as e:
            logger.error(f"Transcription API timed out: {e}", extra={"trace_id": request.trace_id})
            return self._fallback(request, "timeout", e)

        except httpx.HTTPStatusError as e:
            logger.error(
                f"Transcription API error: {e.response.status_code} - {e.response.text}",
                extra={"trace_id": request.trace_id, "status_code": e.response.status_code},
            )
            return self._fallback(request, "upstream_error", e)

        except Exception as e:
            logger.error(
                f"Transcription API call failed: {e}",
                exc_info=True,
                extra={"trace_id": request.trace_id},
            )
            return self._fallback(request, "backend_unavailable", e)

        logger.info("Received response from transcription API", extra={"trace_id": request.trace_id})
        return STTResponse(
            status="success",
            text=text,
            metadata={
                "backend": "openai_whisper",
                "model": self.model_name,
                "trace_id": request.trace_id,
            },
        )
