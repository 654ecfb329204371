"""
Prompt Builder Layer
====================

Assembles the coach prompt for the completion API.

Responsibilities:
- Holds the two structured-report templates (generic and Amazon PM)
- Holds the matching coach system roles
- Substitutes question and transcript into the selected template
- Estimates prompt size for the token budget

Invariants:
- The "## " section headings are parsed by the UI renderer; keep their
  wording and order stable.
- Question and transcript are inserted verbatim. There is no escaping, so a
  candidate can steer the model through their own answer (prompt injection).
  Escaping would change the prompt text the model sees, so it is left as is.
- The system role goes into the backend's "system" message, not into
  user_prompt.
"""

import math

from .types import FeedbackMode, FeedbackRequest, PromptSpec

# ── Section headings (UI contract) ────────────────────────────────────────────
HEADING_OVERALL_SCORE = "## 📊 Overall Score"
HEADING_STRUCTURE = "## 📌 Answer Structure Analysis"
HEADING_STAR = "## 📌 STAR Method Analysis"
HEADING_LEADERSHIP = "## 🏆 Amazon Leadership Principles Assessment"
HEADING_PM_SKILLS = "## 🧠 PM-Specific Skills Assessment"
HEADING_IMPROVEMENTS = "## 🚀 Improvement Suggestions"
HEADING_SUMMARY = "## ⚡ Summary & Key Takeaways"

# ── System roles ──────────────────────────────────────────────────────────────
STANDARD_SYSTEM_ROLE = (
    "You are an Amazon interview coach helping candidates improve their "
    "interview skills."
)
AMAZON_PM_SYSTEM_ROLE = (
    "You are an expert Amazon interview coach specializing in Product "
    "Management roles. You have extensive knowledge of the STAR method and "
    "Amazon Leadership Principles."
)

# ── Report templates ──────────────────────────────────────────────────────────
STANDARD_TEMPLATE = f"""As an Amazon interview coach, evaluate the following candidate's answer to this question: "{{question}}".

Candidate's answer: "{{transcript}}"

Please return a structured report in exactly this format (use proper markdown):

{HEADING_OVERALL_SCORE}
**Score:** X/10
**Question Category:** [Category]
**Response Summary:** [2-3 word summary]

{HEADING_STRUCTURE}
[Analysis of the answer structure and completeness]

{HEADING_IMPROVEMENTS}
[Provide 3-4 specific ways the candidate could strengthen their answer]
1. [First suggestion]
2. [Second suggestion]
3. [Third suggestion]

{HEADING_SUMMARY}
[Brief summary with actionable improvements]"""

AMAZON_PM_TEMPLATE = f"""As an Amazon interview coach specializing in Product Management roles, evaluate the following candidate's answer to this question: "{{question}}".

Candidate's answer: "{{transcript}}"

Please return a structured report in exactly this format (use proper markdown):

{HEADING_OVERALL_SCORE}
**Score:** X/10
**Question Category:** [Leadership Principle or PM skill the question is testing]
**Response Summary:** [2-3 word summary of candidate's performance]

{HEADING_STAR}
**Situation:** [Did the candidate clearly establish context? Provide brief analysis]
**Task:** [Was their role/responsibility clearly articulated? Provide brief analysis]
**Action:** [Did they explain their specific actions with enough detail? Provide brief analysis]
**Result:** [Did they quantify impact and outcomes? Provide brief analysis]

{HEADING_LEADERSHIP}
[Evaluate how well the answer demonstrated relevant Amazon Leadership Principles]
- **Customer Obsession:** [Assessment]
- **Ownership:** [Assessment]
- **Invent and Simplify:** [Assessment]
- Include only the principles that were relevant to this answer

{HEADING_PM_SKILLS}
- **Product Sense:** [Assessment]
- **Strategic Thinking:** [Assessment]
- **Data-Driven Decision Making:** [Assessment]
- **Cross-Functional Collaboration:** [Assessment]

{HEADING_IMPROVEMENTS}
[Provide 3-4 specific ways the candidate could strengthen their answer]
1. [First suggestion]
2. [Second suggestion]
3. [Third suggestion]

{HEADING_SUMMARY}
[Brief summary of the candidate's performance, highlighting strengths and listing 2-3 actionable improvements]"""

_TEMPLATES = {
    FeedbackMode.STANDARD: (STANDARD_SYSTEM_ROLE, STANDARD_TEMPLATE),
    FeedbackMode.AMAZON_PM: (AMAZON_PM_SYSTEM_ROLE, AMAZON_PM_TEMPLATE),
}

# Rough characters-per-token ratio for English text
_CHARS_PER_TOKEN: int = 4


def estimate_tokens(text: str) -> int:
    """Crude token estimate: ceil(len(text) / 4)."""
    return math.ceil(len(text) / _CHARS_PER_TOKEN)


def build_prompt(request: FeedbackRequest) -> PromptSpec:
    """
    Build the prompt for a validated feedback request.

    Args:
        request: FeedbackRequest whose transcript already passed validation

    Returns:
        PromptSpec with the persona, the filled-in report template and the
        estimated input token count of the template text.
    """
    system_role, template = _TEMPLATES[request.mode]
    user_prompt = template.format(
        question=request.question,
        transcript=request.transcript,
    )
    return PromptSpec(
        system_role=system_role,
        user_prompt=user_prompt,
        estimated_input_tokens=estimate_tokens(user_prompt),
    )
