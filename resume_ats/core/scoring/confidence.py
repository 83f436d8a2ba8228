"""
Completeness-based confidence score for a parsed resume.

This is a coarse 0-100 measure of how much was extracted, not of whether
the extraction is correct.
"""

import math

from resume_ats.data.models import ParsedResume
from resume_ats.utils.constants import CONFIDENCE_PER_ITEM, CONFIDENCE_WEIGHTS

MAX_CONFIDENCE_POINTS = sum(CONFIDENCE_WEIGHTS.values())


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores."""
    return int(math.floor(value + 0.5))


def calculate_confidence_score(resume: ParsedResume) -> int:
    """
    Score a parsed resume by field presence.

    Contact fields earn their full weight when present; collections earn a
    fixed amount per entry up to their weight. The denominator is always the
    sum of all weights.
    """
    info = resume.personal_info
    earned = 0

    if info.full_name:
        earned += CONFIDENCE_WEIGHTS["full_name"]
    if info.email:
        earned += CONFIDENCE_WEIGHTS["email"]
    if info.phone:
        earned += CONFIDENCE_WEIGHTS["phone"]

    collections = {
        "skills": resume.skills,
        "work_experience": resume.work_experience,
        "education": resume.education,
    }
    for key, items in collections.items():
        earned += min(CONFIDENCE_WEIGHTS[key], len(items) * CONFIDENCE_PER_ITEM[key])

    return round_half_up(100 * earned / MAX_CONFIDENCE_POINTS)
