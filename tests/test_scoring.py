import pytest

from services.analyzer.constraints import detect_gaps
from services.analyzer.scoring import extract_features, score

ALL_GAPS = ["language", "level", "output_format", "scope", "examples"]


def test_single_word_prompt_hits_short_prompt_penalties() -> None:
    scores = score("fix", ALL_GAPS)

    assert scores.clarity == 1
    assert scores.completeness == 1
    assert scores.specificity == 5
    # 4 + 3 (action verb) - 2 (under three words)
    assert scores.intent_alignment == 5
    assert scores.total == 12


def test_detailed_prompt_scores_high() -> None:
    text = (
        "Write a Python function that sorts a list of 100 integers, using the "
        "QuickSort algorithm. Explain each step for a beginner."
    )

    scores = score(text, ["examples"])

    assert scores.clarity == 9
    assert scores.completeness == 9
    assert scores.specificity == 8
    assert scores.intent_alignment == 8
    assert scores.total == 34


def test_acronym_and_question_bonuses() -> None:
    scores = score("Explain how the HTTP protocol works?", [])

    assert scores.clarity == 5
    assert scores.specificity == 6
    assert scores.intent_alignment == 9


def test_completeness_is_clamped() -> None:
    long_text = " ".join(f"word{i}" for i in range(30))

    assert score("tell me a joke", ALL_GAPS).completeness == 1
    assert score(long_text, []).completeness == 10


def test_features_count_sentence_runs() -> None:
    features = extract_features("Really?! Yes... Fine")

    assert features.sentence_count == 2
    assert features.word_count == 3
    assert features.has_question


def test_sentence_count_is_at_least_one() -> None:
    assert extract_features("no punctuation here").sentence_count == 1


@pytest.mark.parametrize(
    "text",
    [
        "fix",
        "hi",
        "Write a Python function to sort a list",
        "Compare REST and GraphQL APIs for a beginner, with examples and 3 diagrams.",
        "a a a a a a a a a a a a a a a a a a a a a a a a a a a a a a a a",
        "What? Why? How? When? Where? Who?",
    ],
)
def test_total_is_sum_and_dimensions_in_range(text: str) -> None:
    scores = score(text, detect_gaps(text).gaps)

    dimensions = [
        scores.clarity,
        scores.completeness,
        scores.specificity,
        scores.intent_alignment,
    ]
    assert all(0 <= d <= 10 for d in dimensions)
    assert scores.completeness >= 1
    assert scores.total == sum(dimensions)
    assert 0 <= scores.total <= 40
