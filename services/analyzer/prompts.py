"""Analysis prompts for LLM."""
import json
from typing import Mapping, Optional

from .models import ConstraintValue


def build_analysis_prompt(text: str, constraints: Optional[Mapping[str, ConstraintValue]] = None) -> str:
    """Build the combined gaps + suggestions + refinement prompt."""
    constraint_info = ""
    if constraints:
        constraint_info = (
            f"\nThe user has already selected these constraints: {json.dumps(dict(constraints))}. "
            "Do NOT include these in gaps."
        )

    return f"""You are a prompt engineering expert. Analyze the user prompt below and return a JSON object.

RULES:
1. gaps: only constraint categories that are genuinely missing, chosen from: language, level, output_format, scope, examples
2. suggestions: one key per gap, each with exactly 3 options SPECIFIC to this prompt's topic
3. refined: a clearer, more complete rewrite that keeps the original intent and naturally includes any selected constraints
4. Do NOT invent requirements the user did not ask for
5. Return JSON only

INPUT: {text}{constraint_info}

OUTPUT: A single JSON object in this exact format (return ONLY the JSON object, no other text):
{{
  "gaps": ["language", "level"],
  "suggestions": {{
    "language": ["...", "...", "..."],
    "level": ["...", "...", "..."]
  }},
  "refined": "..."
}}

Examples:
- "sort a list" → {{"gaps": ["language", "level", "output_format", "examples"], "suggestions": {{"language": ["Python", "JavaScript", "Java"], "level": ["Beginner", "Intermediate", "Advanced"], "output_format": ["Code only", "Code + Explanation", "Step-by-step"], "examples": ["Include sample input/output", "Show edge cases", "No examples needed"]}}, "refined": "Write a function that sorts a list of integers in ascending order."}}

If nothing is missing, return "gaps": [] and "suggestions": {{}}.

Remember: Return ONLY the JSON object, no explanations or markdown.
"""
