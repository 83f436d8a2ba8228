"""
Pydantic value models for resume-ats.
"""

# Base models
from .base import EmbeddedModel

# Resume models
from .resume import (
    Certification,
    Education,
    ParsedResume,
    PersonalInfo,
    Skill,
    WorkExperience,
)

# Score models
from .score import (
    AdvancedScoreBreakdown,
    ScoreCategories,
    ScoreCategory,
)

__all__ = [
    "EmbeddedModel",
    "Certification",
    "Education",
    "ParsedResume",
    "PersonalInfo",
    "Skill",
    "WorkExperience",
    "AdvancedScoreBreakdown",
    "ScoreCategories",
    "ScoreCategory",
]
