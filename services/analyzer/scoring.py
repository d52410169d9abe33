"""Prompt quality scoring.

Scores a prompt across four dimensions (0-10 each):

- clarity: length and punctuation structure
- completeness: how few constraint gaps remain
- specificity: vocabulary diversity, length, numbers and acronyms
- intent_alignment: presence of an actionable verb or question

The total (0-40) is the plain sum of the four.
"""
import re
from dataclasses import dataclass
from typing import Sequence

from .lexicon import ACTION_VERBS
from .models import ScoreCard

_SENTENCE_END_RE = re.compile(r"[.!?]+")
_DIGITS_RE = re.compile(r"[0-9]+")
_ACRONYM_RE = re.compile(r"[A-Z]{2,}")


@dataclass(frozen=True)
class TextFeatures:
    """Lexical features every dimension is computed from."""
    word_count: int
    sentence_count: int
    has_question: bool
    has_comma: bool
    has_period: bool
    diversity: float
    has_digits: bool
    has_acronym: bool
    has_action_verb: bool


def extract_features(text: str) -> TextFeatures:
    words = text.split()
    word_count = len(words)
    unique_words = {w.lower() for w in words}
    lower = text.lower()

    return TextFeatures(
        word_count=word_count,
        sentence_count=len(_SENTENCE_END_RE.findall(text)) or 1,
        has_question="?" in text,
        has_comma="," in text,
        has_period="." in text,
        diversity=len(unique_words) / max(word_count, 1),
        has_digits=_DIGITS_RE.search(text) is not None,
        has_acronym=_ACRONYM_RE.search(text) is not None,
        has_action_verb=any(verb in lower for verb in ACTION_VERBS),
    )


def _clamp(value: int, low: int = 0, high: int = 10) -> int:
    return max(low, min(high, value))


def score_clarity(f: TextFeatures) -> int:
    clarity = 3
    if f.word_count >= 5:
        clarity += 1
    if f.word_count >= 10:
        clarity += 1
    if f.word_count >= 20:
        clarity += 1
    if f.sentence_count >= 2:
        clarity += 1
    if f.has_comma:
        clarity += 1
    if f.has_question or f.has_period:
        clarity += 1
    # Very short prompts are penalized but never drop below 1
    if f.word_count < 3:
        clarity = max(1, clarity - 3)
    return _clamp(clarity)


def score_completeness(f: TextFeatures, gap_count: int) -> int:
    completeness = 10 - gap_count * 2
    if f.word_count >= 15:
        completeness += 1
    if f.word_count >= 30:
        completeness += 1
    return _clamp(completeness, low=1)


def score_specificity(f: TextFeatures) -> int:
    specificity = 3
    if f.diversity > 0.6:
        specificity += 1
    if f.diversity > 0.8:
        specificity += 1
    if f.word_count >= 8:
        specificity += 1
    if f.word_count >= 15:
        specificity += 1
    if f.word_count >= 25:
        specificity += 1
    if f.has_digits:
        specificity += 1
    if f.has_acronym:
        specificity += 1
    return _clamp(specificity)


def score_intent_alignment(f: TextFeatures) -> int:
    alignment = 4
    if f.has_action_verb:
        alignment += 3
    if f.has_question:
        alignment += 1
    if f.word_count >= 5:
        alignment += 1
    if f.word_count < 3:
        alignment = max(1, alignment - 2)
    return _clamp(alignment)


def score(text: str, gaps: Sequence[str] = ()) -> ScoreCard:
    """Score a prompt given the constraint gaps detected for it."""
    features = extract_features(text)

    clarity = score_clarity(features)
    completeness = score_completeness(features, len(gaps))
    specificity = score_specificity(features)
    intent_alignment = score_intent_alignment(features)

    return ScoreCard(
        clarity=clarity,
        completeness=completeness,
        specificity=specificity,
        intent_alignment=intent_alignment,
        total=clarity + completeness + specificity + intent_alignment,
    )
