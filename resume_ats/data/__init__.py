"""
Data layer for resume-ats.

Only value types live here; persistence belongs to the caller.
"""

from .models import (
    AdvancedScoreBreakdown,
    Certification,
    Education,
    ParsedResume,
    PersonalInfo,
    ScoreCategories,
    ScoreCategory,
    Skill,
    WorkExperience,
)

__all__ = [
    "AdvancedScoreBreakdown",
    "Certification",
    "Education",
    "ParsedResume",
    "PersonalInfo",
    "ScoreCategories",
    "ScoreCategory",
    "Skill",
    "WorkExperience",
]
