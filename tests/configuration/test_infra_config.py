"""
tests/configuration/test_infra_config.py

Configuration loading and backend selection.
"""

import dataclasses

import pytest

from inference import OpenAICompletionBackend, StubCompletionBackend
from infra import InfraBootstrap, InfraConfig
from services.stt import OpenAIWhisperSTTBackend, StubSTTBackend


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_TIMEOUT_S", "CORS_ORIGINS", "ENVIRONMENT", "PORT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestFromEnv:

    def test_defaults(self, clean_env):
        config = InfraConfig.from_env()
        assert config.openai_api_key is None
        assert config.openai_base_url == "https://api.openai.com/v1"
        assert config.request_timeout_s == 60.0
        assert config.port == 8080
        assert "http://localhost:3000" in config.cors_origins
        assert config.credentials_configured is False

    def test_overrides(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-live")
        clean_env.setenv("OPENAI_TIMEOUT_S", "12.5")
        clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example ,")
        clean_env.setenv("PORT", "9000")
        config = InfraConfig.from_env()
        assert config.credentials_configured is True
        assert config.request_timeout_s == 12.5
        assert config.cors_origins == ("https://a.example", "https://b.example")
        assert config.port == 9000

    def test_empty_key_counts_as_missing(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "")
        assert InfraConfig.from_env().credentials_configured is False

    def test_config_is_read_only(self, clean_env):
        config = InfraConfig.from_env()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.openai_api_key = "sk-changed"

    def test_repr_hides_key(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-secret-value")
        assert "sk-secret-value" not in repr(InfraConfig.from_env())


class TestBackendSelection:

    def test_missing_key_selects_stubs(self, clean_env):
        infra = InfraBootstrap(InfraConfig.from_env())
        assert isinstance(infra.completion_backend, StubCompletionBackend)
        assert isinstance(infra.get_stt_backend(), StubSTTBackend)

    def test_key_selects_openai_backends(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-live")
        clean_env.setenv("OPENAI_TIMEOUT_S", "7")
        infra = InfraBootstrap(InfraConfig.from_env())
        completion = infra.completion_backend
        stt = infra.get_stt_backend()
        assert isinstance(completion, OpenAICompletionBackend)
        assert isinstance(stt, OpenAIWhisperSTTBackend)
        assert completion.timeout == 7.0
        assert stt.timeout == 7.0
        assert infra.get_feedback_service().backend is completion
