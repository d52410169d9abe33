"""Constraint gap detection."""
import re
from typing import Mapping, Optional

from .lexicon import CONSTRAINT_CATEGORIES, CONSTRAINT_INDICATORS, DEFAULT_SUGGESTIONS
from .models import ConstraintValue, GapReport

# Indicators this short ("go", "r", "c#") need word boundaries
SHORT_INDICATOR_LENGTH = 3


def has_indicator(lower: str, indicator: str) -> bool:
    """Check whether lowercased text contains an indicator."""
    if len(indicator) <= SHORT_INDICATOR_LENGTH:
        return re.search(rf"\b{re.escape(indicator)}\b", lower, re.ASCII) is not None
    return indicator in lower


def detect_gaps(text: str) -> GapReport:
    """Find constraint categories the prompt leaves unspecified."""
    lower = text.lower()
    gaps = []
    suggestions = {}

    for category in CONSTRAINT_CATEGORIES:
        if any(has_indicator(lower, ind) for ind in CONSTRAINT_INDICATORS[category]):
            continue
        gaps.append(category)
        suggestions[category] = list(DEFAULT_SUGGESTIONS[category])

    return GapReport(gaps=gaps, suggestions=suggestions)


def is_filled(value: Optional[ConstraintValue]) -> bool:
    """A selection counts as filled when it carries any non-blank text."""
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, list):
        return any(isinstance(v, str) and v.strip() for v in value)
    return False


def without_filled(report: GapReport, selections: Optional[Mapping[str, ConstraintValue]]) -> GapReport:
    """Drop categories the user already filled from a gap report."""
    if not selections:
        return report

    filled = {category for category, value in selections.items() if is_filled(value)}
    gaps = [gap for gap in report.gaps if gap not in filled]
    suggestions = {gap: report.suggestions[gap] for gap in gaps}
    return GapReport(gaps=gaps, suggestions=suggestions)
