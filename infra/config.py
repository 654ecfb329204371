"""
Infrastructure configuration system.

Environment-based backend selection, read once at startup.
Missing credentials are not an error: the stub backends answer instead.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from inference import CompletionBackend, StubCompletionBackend, OpenAICompletionBackend
from services.stt import STTBackend, StubSTTBackend, OpenAIWhisperSTTBackend

# Load environment variables from .env file at the project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

DEFAULT_CORS_ORIGINS = "https://amzn-interview-q.web.app,http://localhost:3000"


@dataclass(frozen=True)
class InfraConfig:
    """Process-wide configuration. Read-only after startup."""

    openai_api_key: Optional[str]
    openai_base_url: str
    request_timeout_s: float
    cors_origins: Tuple[str, ...]
    environment: str
    port: int

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """Load configuration from environment variables."""
        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
            request_timeout_s=float(os.getenv("OPENAI_TIMEOUT_S", "60")),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            environment=os.getenv("ENVIRONMENT", "development"),
            port=int(os.getenv("PORT", "8080")),
        )

    @property
    def credentials_configured(self) -> bool:
        return bool(self.openai_api_key)

    def create_completion_backend(self) -> CompletionBackend:
        """Create completion backend instance based on configuration."""
        if not self.credentials_configured:
            return StubCompletionBackend()
        return OpenAICompletionBackend(
            api_key=self.openai_api_key,
            base_url=self.openai_base_url,
            timeout=self.request_timeout_s,
        )

    def create_stt_backend(self) -> STTBackend:
        """Create STT backend instance based on configuration."""
        if not self.credentials_configured:
            return StubSTTBackend()
        return OpenAIWhisperSTTBackend(
            api_key=self.openai_api_key,
            base_url=self.openai_base_url,
            timeout=self.request_timeout_s,
        )

    def __repr__(self) -> str:
        return (
            f"InfraConfig(credentials_configured={self.credentials_configured}, "
            f"base_url={self.openai_base_url}, environment={self.environment})"
        )


def get_config() -> InfraConfig:
    """Get infrastructure configuration from the environment."""
    return InfraConfig.from_env()
