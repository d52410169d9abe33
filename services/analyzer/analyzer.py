"""Analyzer strategies: rule-based core and AI-enhanced wrapper.

RuleBasedAnalyzer is pure and always available. EnhancedAnalyzer makes one
combined AI call per operation and falls back to the rule-based analyzer
whenever that call is unavailable or returns anything it cannot fully
validate.
"""
import json
import re
from typing import Callable, Mapping, Optional, Protocol

import structlog
from pydantic import ValidationError

from . import config, llm
from .constraints import detect_gaps, is_filled, without_filled
from .drift import detect_drift
from .intent import classify
from .lexicon import CONSTRAINT_CATEGORIES
from .models import (
    AnalysisResult,
    CombinedAnalysis,
    ConstraintValue,
    GapReport,
    Intent,
    RefinementResult,
)
from .prompts import build_analysis_prompt
from .refiner import refine_by_rules
from .scoring import score
from .warning_generator import generate_warnings

logger = structlog.get_logger()

_FENCE_RE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)

Constraints = Optional[Mapping[str, ConstraintValue]]


class TextAnalyzer(Protocol):
    mode: str

    def analyze(self, text: str, constraints: Constraints = None) -> AnalysisResult:
        ...

    def refine(
        self,
        text: str,
        original: str,
        constraints: Constraints = None,
        intent: Optional[Intent] = None,
    ) -> RefinementResult:
        ...


def has_selections(constraints: Constraints) -> bool:
    return bool(constraints) and any(is_filled(v) for v in constraints.values())


def assemble_analysis(text: str, target: str, refined: str, report: GapReport) -> AnalysisResult:
    """Score and warn on `target` using gaps already decided for it."""
    intent = classify(text)
    scores = score(target, report.gaps)
    warnings = generate_warnings(scores, report.gaps, intent)

    logger.debug(
        "analysis_complete",
        intent=intent.detected,
        gap_count=len(report.gaps),
        total=scores.total,
        warning_count=len(warnings)
    )

    return AnalysisResult(
        intent=intent,
        gaps=report.gaps,
        suggestions=report.suggestions,
        scores=scores,
        warnings=warnings,
        refined=refined,
    )


def assemble_refinement(
    original: str,
    refined: str,
    constraints: Constraints = None,
    intent: Optional[Intent] = None,
) -> RefinementResult:
    """Run drift, gap, scoring and warning checks over a refined prompt."""
    drift = detect_drift(original, refined)
    report = without_filled(detect_gaps(refined), constraints)
    scores = score(refined, report.gaps)
    warnings = generate_warnings(scores, report.gaps, intent or classify(refined))

    # Drift outranks every other warning
    if drift.drift_detected:
        warnings.insert(0, drift.drift_warning)

    return RefinementResult(
        refined=refined,
        gaps=report.gaps,
        suggestions=report.suggestions,
        scores=scores,
        warnings=warnings,
        drift_detected=drift.drift_detected,
        drift_warning=drift.drift_warning,
    )


class RuleBasedAnalyzer:
    """Deterministic keyword/heuristic analyzer."""

    mode = "rule"

    def analyze(self, text: str, constraints: Constraints = None) -> AnalysisResult:
        refined = refine_by_rules(text, constraints)
        # Selected chips are judged on the text they were merged into
        target = refined if has_selections(constraints) else text
        report = without_filled(detect_gaps(target), constraints)
        return assemble_analysis(text, target, refined, report)

    def refine(
        self,
        text: str,
        original: str,
        constraints: Constraints = None,
        intent: Optional[Intent] = None,
    ) -> RefinementResult:
        refined = refine_by_rules(text, constraints)
        return assemble_refinement(original, refined, constraints, intent)


def strip_markdown(raw: str) -> str:
    """Remove ```json fences some models wrap their output in."""
    return _FENCE_RE.sub("", raw).strip()


class EnhancedAnalyzer:
    """AI-backed analyzer with a rule-based fallback."""

    mode = "ai"

    def __init__(
        self,
        generate: Callable[[str], Optional[str]] = llm.generate,
        fallback: Optional[RuleBasedAnalyzer] = None,
    ):
        self.generate = generate
        self.fallback = fallback or RuleBasedAnalyzer()

    def combined_analysis(self, text: str, constraints: Constraints = None) -> Optional[CombinedAnalysis]:
        """One AI call for gaps, suggestions and refined text; None if unusable."""
        try:
            raw = self.generate(build_analysis_prompt(text, constraints))
        except Exception as e:
            logger.error("ai_generate_raised", error=str(e))
            return None

        if not raw:
            logger.debug("ai_analysis_unavailable")
            return None

        try:
            payload = json.loads(strip_markdown(raw))
        except (json.JSONDecodeError, RecursionError) as e:
            logger.warning("ai_output_parse_failed", error=str(e), output=raw[:200])
            return None

        if not isinstance(payload, dict):
            logger.warning("invalid_ai_output_type", type=type(payload).__name__)
            return None

        try:
            return CombinedAnalysis.model_validate(payload)
        except ValidationError as e:
            logger.warning("ai_analysis_invalid", error=str(e), output=raw[:200])
            return None

    def analyze(self, text: str, constraints: Constraints = None) -> AnalysisResult:
        combined = self.combined_analysis(text, constraints)
        if combined is None:
            return self.fallback.analyze(text, constraints)

        ordered = [c for c in CONSTRAINT_CATEGORIES if c in combined.gaps]
        report = without_filled(
            GapReport(gaps=ordered, suggestions=combined.suggestions),
            constraints
        )
        target = combined.refined if has_selections(constraints) else text
        return assemble_analysis(text, target, combined.refined, report)

    def refine(
        self,
        text: str,
        original: str,
        constraints: Constraints = None,
        intent: Optional[Intent] = None,
    ) -> RefinementResult:
        combined = self.combined_analysis(text, constraints)
        if combined is None:
            return self.fallback.refine(text, original, constraints, intent)
        return assemble_refinement(original, combined.refined, constraints, intent)


def build_analyzer() -> TextAnalyzer:
    """Pick the analyzer for the configured mode."""
    if config.USE_AI:
        logger.info("analyzer_mode", mode=EnhancedAnalyzer.mode, model=config.MODEL)
        return EnhancedAnalyzer()
    logger.info("analyzer_mode", mode=RuleBasedAnalyzer.mode)
    return RuleBasedAnalyzer()
