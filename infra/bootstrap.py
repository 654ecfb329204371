"""
Infrastructure initialization and bootstrap.

Creates all service backends from one configuration at startup. The
instance is attached to the FastAPI app and handed to request handlers.
"""

from typing import Optional

from feedback import FeedbackService
from services.stt import STTBackend

from .config import InfraConfig, get_config


class InfraBootstrap:
    """Backends built from configuration, one instance per app."""

    def __init__(self, config: Optional[InfraConfig] = None):
        """Initialize bootstrap with configuration."""
        self.config = config or get_config()
        self.completion_backend = self.config.create_completion_backend()
        self.stt_backend = self.config.create_stt_backend()
        self.feedback_service = FeedbackService(self.completion_backend)

    def get_stt_backend(self) -> STTBackend:
        return self.stt_backend

    def get_feedback_service(self) -> FeedbackService:
        return self.feedback_service

    def __repr__(self) -> str:
        """String representation showing configured backends."""
        return (
            f"InfraBootstrap(completion={type(self.completion_backend).__name__}, "
            f"stt={type(self.stt_backend).__name__})"
        )


def bootstrap_infrastructure(config: Optional[InfraConfig] = None) -> InfraBootstrap:
    """
    Bootstrap all infrastructure backends.

    Args:
        config: Optional custom configuration

    Returns:
        InfraBootstrap instance with all backends initialized
    """
    return InfraBootstrap(config)
