"""Rule-based intent classification."""
from .lexicon import INTENT_RULES
from .models import Intent


def classify(text: str) -> Intent:
    """
    Classify a prompt by first keyword match against INTENT_RULES.

    Rules are scanned in table order, so a prompt matching several
    categories resolves to the one declared first. No match yields the
    low-confidence "general" intent.
    """
    lower = text.lower()
    for intent, keywords in INTENT_RULES:
        if any(keyword in lower for keyword in keywords):
            return Intent(detected=intent, confidence="medium", source="rule")
    return Intent(detected="general", confidence="low", source="rule")
