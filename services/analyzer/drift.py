"""Intent drift detection by keyword retention."""
import math
import re

import structlog

from .lexicon import STOP_WORDS
from .models import DriftResult

logger = structlog.get_logger()

# Below this share of surviving original keywords the refinement has drifted
DRIFT_THRESHOLD = 0.4

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")


def extract_keywords(text: str) -> list[str]:
    """Lowercased content words, in order, duplicates kept."""
    cleaned = _NON_ALNUM_RE.sub("", text.lower())
    return [w for w in cleaned.split() if len(w) > 2 and w not in STOP_WORDS]


def _percent(ratio: float) -> int:
    # Half-up, so 12.5% reads as 13%
    return int(math.floor(ratio * 100 + 0.5))


def detect_drift(original: str, refined: str) -> DriftResult:
    """
    Compare an original prompt against its refined version.

    Each original keyword (duplicates included) is checked for membership
    in the refined keyword set. An original without keywords cannot drift.
    """
    original_keywords = extract_keywords(original)
    if not original_keywords:
        return DriftResult(drift_detected=False, drift_warning="")

    refined_keywords = set(extract_keywords(refined))
    retained = sum(1 for kw in original_keywords if kw in refined_keywords)
    overlap = retained / len(original_keywords)

    if overlap < DRIFT_THRESHOLD:
        logger.info(
            "drift_detected",
            overlap=round(overlap, 3),
            original_keywords=len(original_keywords),
        )
        return DriftResult(
            drift_detected=True,
            drift_warning=(
                f"Intent drift detected: only {_percent(overlap)}% of original keywords "
                "are preserved in the refined prompt. The refinement may have altered "
                "your original intent."
            ),
        )

    return DriftResult(drift_detected=False, drift_warning="")
