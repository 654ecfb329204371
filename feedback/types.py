from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FeedbackMode(str, Enum):
    """Report template / coach persona selector."""

    STANDARD = "standard"
    AMAZON_PM = "amazon_pm"

    @classmethod
    def from_request(cls, value: Optional[Any]) -> "FeedbackMode":
        """Only the exact string "amazon_pm" selects the PM report."""
        if value == cls.AMAZON_PM.value:
            return cls.AMAZON_PM
        return cls.STANDARD


@dataclass
class FeedbackRequest:
    question: str
    transcript: str
    mode: FeedbackMode = FeedbackMode.STANDARD

    def __post_init__(self):
        if self.question is None:
            self.question = ""


@dataclass(frozen=True)
class PromptSpec:
    system_role: str
    user_prompt: str
    estimated_input_tokens: int


@dataclass(frozen=True)
class CompletionBudget:
    model: str
    max_output_tokens: int
