"""Data models for analyzer service."""
from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

IntentCategory = Literal[
    "code_generation",
    "explanation",
    "debugging",
    "creative_writing",
    "data_analysis",
    "summarization",
    "translation",
    "comparison",
    "instruction",
    "general",
]
ConstraintCategory = Literal["language", "level", "output_format", "scope", "examples"]
ConstraintValue = Union[str, list[str]]


class AnalyzerModel(BaseModel):
    """Base model: immutable, camelCase on the wire, snake_case in Python."""

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True


class Intent(AnalyzerModel):
    """Inferred action category of a prompt."""
    detected: IntentCategory = "general"
    confidence: Literal["high", "medium", "low"] = "low"
    source: Literal["rule", "ai", "hybrid"] = "rule"


class GapReport(AnalyzerModel):
    """Missing constraint categories and the chips offered to fill them."""
    gaps: list[ConstraintCategory] = Field(default_factory=list)
    suggestions: dict[ConstraintCategory, list[str]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def suggestions_match_gaps(self):
        if len(set(self.gaps)) != len(self.gaps):
            raise ValueError("gaps must not repeat a category")
        if set(self.suggestions) != set(self.gaps):
            raise ValueError("suggestion keys must be exactly the gaps")
        return self


class ScoreCard(AnalyzerModel):
    """Four 0-10 quality dimensions and their sum."""
    clarity: int = Field(..., ge=0, le=10)
    completeness: int = Field(..., ge=0, le=10)
    specificity: int = Field(..., ge=0, le=10)
    intent_alignment: int = Field(..., ge=0, le=10)
    total: int = Field(..., ge=0, le=40)

    @model_validator(mode="after")
    def total_is_sum(self):
        expected = self.clarity + self.completeness + self.specificity + self.intent_alignment
        if self.total != expected:
            raise ValueError(f"total must equal the sum of the dimensions ({expected})")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "clarity": 7,
                "completeness": 4,
                "specificity": 6,
                "intentAlignment": 8,
                "total": 25
            }
        }


class DriftResult(AnalyzerModel):
    """Keyword-retention check between an original and a refined prompt."""
    drift_detected: bool = False
    drift_warning: str = ""

    @model_validator(mode="after")
    def warning_iff_drift(self):
        if self.drift_detected != bool(self.drift_warning):
            raise ValueError("drift_warning must be set exactly when drift is detected")
        return self


class AnalysisResult(AnalyzerModel):
    """Full analysis of a single prompt."""
    intent: Intent
    gaps: list[ConstraintCategory]
    suggestions: dict[ConstraintCategory, list[str]]
    scores: ScoreCard
    warnings: list[str]
    refined: str


class RefinementResult(AnalyzerModel):
    """Analysis of a refined prompt, including drift against the original."""
    refined: str
    gaps: list[ConstraintCategory]
    suggestions: dict[ConstraintCategory, list[str]]
    scores: ScoreCard
    warnings: list[str]
    drift_detected: bool = False
    drift_warning: str = ""


class CombinedAnalysis(AnalyzerModel):
    """Payload expected back from the combined AI analysis call."""
    gaps: list[ConstraintCategory]
    suggestions: dict[ConstraintCategory, list[str]]
    refined: str = Field(..., min_length=1)

    @field_validator("refined")
    def refined_not_blank(cls, v):
        if not v.strip():
            raise ValueError("refined text must not be blank")
        return v.strip()

    @field_validator("suggestions")
    def suggestion_lists_sized(cls, v):
        for category, values in v.items():
            if not 3 <= len(values) <= 6:
                raise ValueError(f"{category} must offer 3-6 suggestions")
            if any(not value.strip() for value in values):
                raise ValueError(f"{category} has a blank suggestion")
        return v

    @model_validator(mode="after")
    def suggestions_match_gaps(self):
        if len(set(self.gaps)) != len(self.gaps):
            raise ValueError("gaps must not repeat a category")
        if set(self.suggestions) != set(self.gaps):
            raise ValueError("suggestion keys must be exactly the gaps")
        return self


class PromptVersion(AnalyzerModel):
    """One entry in a prompt's version history."""
    label: str = Field(..., description="e.g. v0_raw, v1_structured, v2_refined")
    text: str
    created_at: datetime = Field(default_factory=datetime.now)


class PromptRecord(AnalyzerModel):
    """Snapshot of a prompt's lifecycle as persisted by the store."""
    schema_version: str = "1.0"
    prompt_id: str = Field(..., description="Opaque prompt identifier")
    versions: list[PromptVersion] = Field(default_factory=list)
    intent: Optional[Intent] = None
    constraints: dict[ConstraintCategory, ConstraintValue] = Field(default_factory=dict)
    gaps: list[ConstraintCategory] = Field(default_factory=list)
    suggestions: dict[ConstraintCategory, list[str]] = Field(default_factory=dict)
    scores: Optional[ScoreCard] = None
    warnings: list[str] = Field(default_factory=list)
    drift_warning: str = ""
    updated_at: datetime = Field(default_factory=datetime.now)


class AnalyzeRequest(AnalyzerModel):
    """Request model for initial prompt analysis."""
    text: str = ""

    class Config:
        json_schema_extra = {
            "example": {"text": "Write a function that sorts a list"}
        }


class ClarifyRequest(AnalyzerModel):
    """Request model for merging selected constraint chips."""
    prompt_id: Optional[str] = None
    selections: Optional[dict[ConstraintCategory, ConstraintValue]] = None
    original_text: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "promptId": "prm_abc123def456",
                "selections": {"language": "Python", "level": "Beginner"},
                "originalText": "Write a function that sorts a list"
            }
        }


class RefineRequest(AnalyzerModel):
    """Request model for further refinement with drift check."""
    prompt_id: Optional[str] = None
    text: str = ""
    constraints: dict[ConstraintCategory, ConstraintValue] = Field(default_factory=dict)
    original_text: Optional[str] = None


class AnalyzeResponse(AnalyzerModel):
    """Response model for initial prompt analysis."""
    prompt_id: str
    intent: Intent
    gaps: list[ConstraintCategory]
    suggestions: dict[ConstraintCategory, list[str]]
    scores: ScoreCard
    warnings: list[str]
    versions: list[PromptVersion]
    drift_warning: str = ""


class ClarifyResponse(AnalyzerModel):
    """Response model for constraint clarification."""
    prompt_id: str
    refined: str
    constraints: dict[ConstraintCategory, ConstraintValue]
    gaps: list[ConstraintCategory]
    suggestions: dict[ConstraintCategory, list[str]]
    scores: ScoreCard
    warnings: list[str]
    versions: list[PromptVersion]


class RefineResponse(AnalyzerModel):
    """Response model for refinement and drift detection."""
    prompt_id: str
    refined: str
    gaps: list[ConstraintCategory]
    scores: ScoreCard
    warnings: list[str]
    drift_warning: str
    drift_detected: bool
    versions: list[PromptVersion]
