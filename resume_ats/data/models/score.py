"""
Score breakdown models for resume-ats.
"""

from pydantic import Field

from .base import EmbeddedModel


class ScoreCategory(EmbeddedModel):
    """One scored category; ``details`` always sum to ``score``."""

    score: float = 0.0
    max_score: int = 100
    details: dict[str, float] = Field(default_factory=dict)


class ScoreCategories(EmbeddedModel):
    """The five advanced-score categories."""

    content_quality: ScoreCategory
    ats_compatibility: ScoreCategory
    completeness: ScoreCategory
    experience_quality: ScoreCategory
    professional_presence: ScoreCategory


class AdvancedScoreBreakdown(EmbeddedModel):
    """Weighted multi-category ATS score; recomputed, never stored."""

    overall_score: int
    categories: ScoreCategories
