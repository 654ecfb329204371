"""
Output-token budgeting for the completion call.

The input estimate comes from PromptSpec (characters / 4), not a tokenizer.
"""

from .types import CompletionBudget, PromptSpec

MODEL: str = "gpt-4"
MODEL_CONTEXT_WINDOW: int = 8192
MAX_OUTPUT_TOKENS: int = 4000


def compute_budget(prompt_spec: PromptSpec) -> CompletionBudget:
    """
    Derive max_tokens for the completion request.

    min(MAX_OUTPUT_TOKENS, MODEL_CONTEXT_WINDOW - estimated input), floored
    at 0 when the prompt alone exceeds the context window.
    """
    remaining = MODEL_CONTEXT_WINDOW - prompt_spec.estimated_input_tokens
    max_output = max(0, min(MAX_OUTPUT_TOKENS, remaining))
    return CompletionBudget(model=MODEL, max_output_tokens=max_output)
