import pytest

from services.analyzer.intent import classify
from services.analyzer.models import Intent


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Write a Python function to sort a list", "code_generation"),
        ("What is a monad?", "explanation"),
        ("I have an error in my loop", "debugging"),
        ("Summarize this paper", "summarization"),
        ("Compare React and Vue", "comparison"),
        ("Translate this sentence into Spanish", "translation"),
    ],
)
def test_classify_matches_keyword_rules(text: str, expected: str) -> None:
    intent = classify(text)

    assert intent.detected == expected
    assert intent.confidence == "medium"
    assert intent.source == "rule"


def test_classify_is_case_insensitive() -> None:
    assert classify("EXPLAIN RECURSION").detected == "explanation"


def test_first_rule_in_table_order_wins() -> None:
    # "explain" (explanation) and "fix" (debugging) both match
    intent = classify("Explain why this fix does not work")

    assert intent.detected == "explanation"


def test_no_match_falls_back_to_general() -> None:
    intent = classify("hello there")

    assert intent == Intent(detected="general", confidence="low", source="rule")


def test_classify_is_deterministic() -> None:
    text = "Can you help me plot this dataset?"

    assert classify(text) == classify(text)
