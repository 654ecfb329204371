from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any, List


class GatewayErrorKind(str, Enum):
    AUTH_ERROR = "auth_error"
    RATE_LIMITED = "rate_limited"
    UNAVAILABLE = "unavailable"   # network failure or timeout
    UNKNOWN = "unknown"


@dataclass
class CompletionRequest:
    model: str
    system_role: str
    user_prompt: str
    max_tokens: int
    temperature: float = 0.1
    trace_id: Optional[str] = None

    def messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_role},
            {"role": "user", "content": self.user_prompt},
        ]

    def to_payload(self) -> Dict[str, Any]:
        """Chat completions request body."""
        return {
            "model": self.model,
            "messages": self.messages(),
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


class GatewayError(Exception):
    """
    Completion API failure, already mapped to the status the client sees.

    http_status is not necessarily the upstream status: auth failures are
    reported as 500.
    """

    def __init__(
        self,
        kind: GatewayErrorKind,
        http_status: int,
        message: str,
        raw_details: Any = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.http_status = http_status
        self.message = message
        self.raw_details = raw_details

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.raw_details}

    def __repr__(self) -> str:
        return f"GatewayError(kind={self.kind.value}, http_status={self.http_status})"
