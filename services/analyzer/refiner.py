"""Rule-based prompt refinement.

Restructures a prompt without changing what it asks for: capitalizes it,
terminates it, and writes any selected constraint chips back in as a
requirements block.
"""
import re
from typing import Mapping, Optional

from .constraints import is_filled
from .lexicon import CONSTRAINT_CATEGORIES, CONSTRAINT_LABELS
from .models import ConstraintValue

REQUIREMENTS_HEADER = "\n\nRequirements:"


def format_value(value: ConstraintValue) -> str:
    if isinstance(value, list):
        return ", ".join(v.strip() for v in value if isinstance(v, str) and v.strip())
    return value.strip()


def refine_by_rules(text: str, constraints: Optional[Mapping[str, ConstraintValue]] = None) -> str:
    """Apply structural improvements and merge selected constraints."""
    refined = text.strip()
    if refined:
        refined = refined[0].upper() + refined[1:]

    # Punctuation applies to the prompt itself, not a merged requirements block
    body, sep, requirements = refined.partition(REQUIREMENTS_HEADER)
    if not re.search(r"[.!?]$", body):
        body += "."
    refined = body + sep + requirements

    lines = []
    for category in CONSTRAINT_CATEGORIES:
        value = (constraints or {}).get(category)
        if not is_filled(value):
            continue
        line = f"- {CONSTRAINT_LABELS[category]}: {format_value(value)}"
        # Already merged by an earlier pass
        if line in refined:
            continue
        lines.append(line)

    if lines:
        if sep:
            refined += "\n" + "\n".join(lines)
        else:
            refined += REQUIREMENTS_HEADER + "\n" + "\n".join(lines)

    return refined
