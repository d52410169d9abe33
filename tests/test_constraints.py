from services.analyzer.constraints import detect_gaps, has_indicator, without_filled
from services.analyzer.lexicon import CONSTRAINT_CATEGORIES, DEFAULT_SUGGESTIONS
from services.analyzer.models import GapReport

ALL_GAPS = ["language", "level", "output_format", "scope", "examples"]


def test_vague_prompt_misses_every_category_in_order() -> None:
    report = detect_gaps("tell me a joke")

    assert report.gaps == ALL_GAPS
    assert list(report.suggestions) == ALL_GAPS
    assert report.suggestions["language"] == list(DEFAULT_SUGGESTIONS["language"])


def test_fully_constrained_prompt_has_no_gaps() -> None:
    report = detect_gaps(
        "Write a Python function for beginners with an example, return JSON"
    )

    assert report.gaps == []
    assert report.suggestions == {}


def test_suggestion_keys_are_exactly_the_gaps() -> None:
    report = detect_gaps("Write a Python function to sort a list")

    assert report.gaps == ["level", "examples"]
    assert set(report.suggestions) == set(report.gaps)


def test_short_language_name_needs_word_boundary() -> None:
    assert "language" in detect_gaps("algorithm").gaps
    assert "language" not in detect_gaps("Let's use R for this").gaps


def test_short_scope_indicator_needs_word_boundary() -> None:
    assert "scope" in detect_gaps("rapid prototyping tips").gaps
    assert "scope" not in detect_gaps("build an API client").gaps


def test_symbol_terminated_short_indicator_keeps_boundary_quirk() -> None:
    # No word character follows "c++", so the boundary never matches
    assert not has_indicator("write it in c++ please", "c++")
    assert has_indicator("write it in go please", "go")


def test_long_indicators_match_as_substrings() -> None:
    assert has_indicator("javascripty things", "javascript")
    assert "level" not in detect_gaps("an intermediate-level tutorial").gaps


def test_default_suggestions_offer_three_to_six_values() -> None:
    for category in CONSTRAINT_CATEGORIES:
        assert 3 <= len(DEFAULT_SUGGESTIONS[category]) <= 6


def test_without_filled_drops_selected_categories() -> None:
    report = detect_gaps("tell me a joke")

    trimmed = without_filled(
        report,
        {"language": "Python", "level": ["Beginner"], "scope": "   "},
    )

    assert trimmed.gaps == ["output_format", "scope", "examples"]
    assert set(trimmed.suggestions) == set(trimmed.gaps)


def test_without_filled_without_selections_is_identity() -> None:
    report = GapReport(gaps=["level"], suggestions={"level": ["Beginner", "Intermediate", "Advanced"]})

    assert without_filled(report, None) is report
    assert without_filled(report, {}) is report
