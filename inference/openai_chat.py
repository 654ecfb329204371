"""
OpenAI-compatible chat completions backend.

One POST per request, no retries, bounded timeout. The provider response is
returned unchanged; only failures are reshaped (into GatewayError).
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .base import CompletionBackend
from .types import CompletionRequest, GatewayError, GatewayErrorKind

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT_S = 60.0

RATE_LIMIT_MESSAGE = "OpenAI rate limit exceeded. Please try again later."
AUTH_ERROR_MESSAGE = "Authentication error with AI provider. Please contact support."
AUTH_ERROR_DETAILS = "API key may be invalid or expired"
GENERIC_ERROR_MESSAGE = "Failed to generate feedback"


def _response_details(response: httpx.Response) -> Any:
    """Upstream error body: JSON if it parses, raw text otherwise."""
    try:
        return response.json()
    except ValueError:
        return response.text


def map_status_error(status_code: int, details: Any) -> GatewayError:
    """
    Translate an upstream HTTP error status into a GatewayError.

    401 is reported as 500 with a fixed message; the upstream body is not
    forwarded to the client.
    """
    if status_code == 429:
        return GatewayError(
            GatewayErrorKind.RATE_LIMITED, 429, RATE_LIMIT_MESSAGE, details
        )
    if status_code == 401:
        return GatewayError(
            GatewayErrorKind.AUTH_ERROR, 500, AUTH_ERROR_MESSAGE, AUTH_ERROR_DETAILS
        )
    return GatewayError(
        GatewayErrorKind.UNKNOWN,
        500,
        GENERIC_ERROR_MESSAGE,
        f"Completion API returned {status_code}",
    )


class OpenAICompletionBackend(CompletionBackend):
    """
    Chat completions over httpx.

    Guarantees:
    - Exactly one upstream attempt per call
    - API key only ever sent in the Authorization header, never logged
    - Every failure surfaces as GatewayError
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_S,
    ):
        """
        Args:
            api_key:  Bearer token for the provider
            base_url: API root, e.g. "https://api.openai.com/v1"
            timeout:  Seconds before the request is abandoned
        """
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    async def complete(self, request: CompletionRequest) -> Dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        log_extra: Dict[str, Optional[Any]] = {
            "model": request.model,
            "max_tokens": request.max_tokens,
            "trace_id": request.trace_id,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    json=request.to_payload(),
                    headers=headers,
                )
            response.raise_for_status()
            data = response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            details = _response_details(e.response)
            logger.error(
                f"Completion API error: {status_code} - {details}",
                extra={**log_extra, "status_code": status_code},
            )
            raise map_status_error(status_code, details) from e

        except httpx.RequestError as e:
            logger.error(
                f"Completion API request failed: {e}",
                exc_info=True,
                extra=log_extra,
            )
            raise GatewayError(
                GatewayErrorKind.UNAVAILABLE, 500, GENERIC_ERROR_MESSAGE, str(e)
            ) from e

        except Exception as e:
            logger.error(
                f"Unexpected completion error: {e}",
                exc_info=True,
                extra=log_extra,
            )
            raise GatewayError(
                GatewayErrorKind.UNKNOWN, 500, GENERIC_ERROR_MESSAGE, str(e)
            ) from e

        logger.info("Received completion response", extra=log_extra)
        return data
