from abc import ABC, abstractmethod
from typing import Any, Dict

from .types import CompletionRequest


class CompletionBackend(ABC):
    """
    Abstract completion boundary.
    The feedback pipeline depends ONLY on this interface.
    """

    # Failures propagate as GatewayError; the caller needs actionable feedback
    soft_fail: bool = False

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> Dict[str, Any]:
        """
        Run one chat completion.

        Returns:
            The provider's response body, unchanged

        Raises:
            GatewayError: on any upstream or transport failure
        """
        raise NotImplementedError
