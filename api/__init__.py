"""HTTP proxy layer - Module Exports"""

from .app import create_app, HEALTH_MESSAGE
from .routes import router, get_infra
from .schemas import FeedbackPayload

__all__ = [
    "create_app",
    "HEALTH_MESSAGE",
    "router",
    "get_infra",
    "FeedbackPayload",
]
