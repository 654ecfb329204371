"""
tests/gateways/test_openai_chat.py

Tests for OpenAICompletionBackend error mapping and pass-through.

Verifies:
✔ Success returns the provider body unchanged
✔ Request payload carries model, messages, max_tokens, temperature
✔ 429 → GatewayError(rate_limited, 429) with upstream details
✔ 401 → GatewayError(auth_error, 500) without upstream body
✔ Other HTTP errors → GatewayError(unknown, 500)
✔ Timeouts / network errors → GatewayError(unavailable, 500)
✔ Exactly one upstream attempt
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from inference import (
    CompletionRequest,
    GatewayError,
    GatewayErrorKind,
    OpenAICompletionBackend,
    StubCompletionBackend,
    SIMULATED_FEEDBACK_TEXT,
)


# ─────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────


def make_request():
    return CompletionRequest(
        model="gpt-4",
        system_role="You are a coach.",
        user_prompt="Evaluate this answer.",
        max_tokens=4000,
        temperature=0.1,
        trace_id="test-trace-001",
    )


def mock_client(mock_class, response=None, side_effect=None):
    mock_instance = AsyncMock()
    mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
    mock_instance.__aexit__ = AsyncMock(return_value=False)
    if side_effect is not None:
        mock_instance.post.side_effect = side_effect
    else:
        mock_instance.post.return_value = response
    mock_class.return_value = mock_instance
    return mock_instance


def ok_response(body):
    response = MagicMock()
    response.status_code = 200
    response.raise_for_status = MagicMock()
    response.json.return_value = body
    return response


def error_response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.text = str(body)
    response.raise_for_status.side_effect = httpx.HTTPStatusError(
        f"HTTP {status_code}", request=MagicMock(), response=response
    )
    return response


# ─────────────────────────────────────────────────────
# Payload + success
# ─────────────────────────────────────────────────────


class TestCompletionRequest:

    def test_payload_shape(self):
        payload = make_request().to_payload()
        assert payload["model"] == "gpt-4"
        assert payload["max_tokens"] == 4000
        assert payload["temperature"] == 0.1
        assert payload["messages"] == [
            {"role": "system", "content": "You are a coach."},
            {"role": "user", "content": "Evaluate this answer."},
        ]


class TestOpenAICompletionSuccess:

    @pytest.mark.asyncio
    async def test_returns_body_unchanged(self):
        body = {
            "id": "chatcmpl-1",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": "## 📊 Overall Score"}}],
            "usage": {"total_tokens": 42},
        }
        with patch("inference.openai_chat.httpx.AsyncClient") as mock_class:
            client = mock_client(mock_class, response=ok_response(body))
            backend = OpenAICompletionBackend(api_key="sk-test", base_url="https://llm.example.com/v1/")
            result = await backend.complete(make_request())

        assert result == body
        assert client.post.await_count == 1
        args, kwargs = client.post.call_args
        assert args[0] == "https://llm.example.com/v1/chat/completions"
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
        assert kwargs["json"] == make_request().to_payload()

    @pytest.mark.asyncio
    async def test_timeout_is_bounded(self):
        with patch("inference.openai_chat.httpx.AsyncClient") as mock_class:
            mock_client(mock_class, response=ok_response({"choices": []}))
            backend = OpenAICompletionBackend(api_key="sk-test", timeout=5.0)
            await backend.complete(make_request())

        assert mock_class.call_args.kwargs["timeout"] == 5.0


# ─────────────────────────────────────────────────────
# Error mapping
# ─────────────────────────────────────────────────────


class TestOpenAICompletionErrors:

    @pytest.mark.asyncio
    async def test_rate_limited(self):
        upstream = {"error": {"message": "Rate limit reached", "type": "requests"}}
        with patch("inference.openai_chat.httpx.AsyncClient") as mock_class:
            client = mock_client(mock_class, response=error_response(429, upstream))
            backend = OpenAICompletionBackend(api_key="sk-test")
            with pytest.raises(GatewayError) as exc:
                await backend.complete(make_request())

        assert exc.value.kind is GatewayErrorKind.RATE_LIMITED
        assert exc.value.http_status == 429
        assert exc.value.raw_details == upstream
        assert client.post.await_count == 1

    @pytest.mark.asyncio
    async def test_auth_error_is_opaque(self):
        upstream = {"error": {"message": "Incorrect API key provided: sk-test", "code": "invalid_api_key"}}
        with patch("inference.openai_chat.httpx.AsyncClient") as mock_class:
            mock_client(mock_class, response=error_response(401, upstream))
            backend = OpenAICompletionBackend(api_key="sk-test")
            with pytest.raises(GatewayError) as exc:
                await backend.complete(make_request())

        err = exc.value
        assert err.kind is GatewayErrorKind.AUTH_ERROR
        assert err.http_status == 500
        body = str(err.to_body())
        assert "401" not in body
        assert "invalid_api_key" not in body
        assert "Authentication error" in err.message

    @pytest.mark.asyncio
    async def test_other_status_is_unknown(self):
        with patch("inference.openai_chat.httpx.AsyncClient") as mock_class:
            mock_client(mock_class, response=error_response(503, {"error": "overloaded"}))
            backend = OpenAICompletionBackend(api_key="sk-test")
            with pytest.raises(GatewayError) as exc:
                await backend.complete(make_request())

        assert exc.value.kind is GatewayErrorKind.UNKNOWN
        assert exc.value.http_status == 500
        assert exc.value.to_body()["error"] == "Failed to generate feedback"

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self):
        with patch("inference.openai_chat.httpx.AsyncClient") as mock_class:
            mock_client(mock_class, side_effect=httpx.ReadTimeout("timed out"))
            backend = OpenAICompletionBackend(api_key="sk-test")
            with pytest.raises(GatewayError) as exc:
                await backend.complete(make_request())

        assert exc.value.kind is GatewayErrorKind.UNAVAILABLE
        assert exc.value.http_status == 500
        assert "timed out" in exc.value.raw_details

    @pytest.mark.asyncio
    async def test_malformed_json_is_unknown(self):
        response = ok_response(None)
        response.json.side_effect = ValueError("Bad JSON")
        with patch("inference.openai_chat.httpx.AsyncClient") as mock_class:
            mock_client(mock_class, response=response)
            backend = OpenAICompletionBackend(api_key="sk-test")
            with pytest.raises(GatewayError) as exc:
                await backend.complete(make_request())

        assert exc.value.kind is GatewayErrorKind.UNKNOWN


class TestStubCompletionBackend:

    @pytest.mark.asyncio
    async def test_returns_simulated_payload(self):
        result = await StubCompletionBackend().complete(make_request())
        assert result["choices"][0]["message"]["content"] == SIMULATED_FEEDBACK_TEXT

    def test_failure_policy(self):
        assert OpenAICompletionBackend.soft_fail is False
        assert StubCompletionBackend.soft_fail is False
