"""User-facing warnings derived from scores, gaps and intent."""
from typing import Optional, Sequence

from .models import Intent, ScoreCard

HIGH_HALLUCINATION_RISK = (
    "High hallucination risk: your prompt is very vague. "
    "The AI may generate inaccurate or fabricated information."
)
MODERATE_HALLUCINATION_RISK = (
    "Moderate hallucination risk: adding more specific details "
    "will help the AI produce more accurate results."
)
MOST_CONSTRAINTS_MISSING = (
    "Most constraints are missing. Consider specifying language, "
    "difficulty level, output format, and scope for better results."
)
LOW_CLARITY = (
    "Low clarity score. Try rephrasing your prompt with clearer "
    "language and proper sentence structure."
)
UNCLEAR_INTENT = (
    "Unclear intent. Your prompt doesn't clearly express what action "
    'the AI should take. Try starting with a verb like "Write", "Explain", '
    '"Create", or "Compare".'
)
LOW_CONFIDENCE = (
    "Intent detection confidence is low. The system may not have "
    "correctly understood what you're asking for."
)
LOW_QUALITY = (
    "Overall prompt quality is low. Significant improvements are "
    "recommended before sending to an AI model."
)


def missing_constraints_warning(gaps: Sequence[str]) -> str:
    return (
        f"Missing constraints: {', '.join(gaps)}. "
        "Filling these in will improve the AI response quality."
    )


def generate_warnings(scores: ScoreCard, gaps: Sequence[str] = (), intent: Optional[Intent] = None) -> list[str]:
    """
    Build the ordered warning list for an analysed prompt.

    Order: hallucination risk, missing constraints, clarity, intent
    alignment, intent confidence, total. An unknown intent (None) never
    triggers the confidence warning.
    """
    warnings = []

    if scores.specificity <= 3:
        warnings.append(HIGH_HALLUCINATION_RISK)
    elif scores.specificity <= 5:
        warnings.append(MODERATE_HALLUCINATION_RISK)

    if len(gaps) >= 4:
        warnings.append(MOST_CONSTRAINTS_MISSING)
    elif len(gaps) >= 2:
        warnings.append(missing_constraints_warning(gaps))

    if scores.clarity <= 3:
        warnings.append(LOW_CLARITY)

    if scores.intent_alignment <= 3:
        warnings.append(UNCLEAR_INTENT)

    if intent is not None and intent.confidence == "low":
        warnings.append(LOW_CONFIDENCE)

    if scores.total <= 12:
        warnings.append(LOW_QUALITY)

    return warnings
