"""
Weighted multi-category ATS score.

Five categories are scored independently on 0-100 and combined with fixed
weights. Keyword, verb and indicator checks are substring searches against
the lowercased JSON serialization of the record, so field names such as
``workExperience`` or ``summary`` count as matches.
"""

from datetime import date
from typing import Optional

from resume_ats.data.models import (
    AdvancedScoreBreakdown,
    ParsedResume,
    ScoreCategories,
    ScoreCategory,
    WorkExperience,
)
from resume_ats.nlp.dates import months_between, parse_normalized_date
from resume_ats.utils.constants import (
    ACTION_VERBS,
    ADVANCED_SCORE_WEIGHTS,
    ALL_ATS_KEYWORDS,
    LAYOUT_RED_FLAGS,
    PROFESSIONAL_EMAIL_DOMAINS,
    QUANTIFIABLE_INDICATORS,
    STANDARD_SECTIONS,
)
from resume_ats.utils.logger import get_logger

from .confidence import round_half_up

logger = get_logger(__name__)


def _category(details: dict[str, float]) -> ScoreCategory:
    return ScoreCategory(score=min(sum(details.values()), 100), max_score=100, details=details)


def _count_hits(haystack: str, terms: tuple[str, ...]) -> int:
    return sum(1 for term in terms if term in haystack)


def calculate_years_of_experience(
    work_experience: list[WorkExperience], today: Optional[date] = None
) -> float:
    """
    Total years across jobs, rounded to one decimal.

    A job counts when it has a parseable start date and either a parseable
    end date or is current (ending today). Negative spans count as zero.
    """
    today = today or date.today()
    total_months = 0
    for job in work_experience:
        start = parse_normalized_date(job.start_date)
        end = today if job.is_current else parse_normalized_date(job.end_date)
        if start is None or end is None:
            continue
        total_months += max(0, months_between(start, end))
    return round(total_months / 12, 1)


class AdvancedScorer:
    """Computes the AdvancedScoreBreakdown for a parsed resume."""

    def __init__(self, today: Optional[date] = None):
        """
        Args:
            today: Reference date for current jobs; defaults to the real date
        """
        self._today = today

    def score(self, resume: ParsedResume) -> AdvancedScoreBreakdown:
        haystack = resume.haystack()

        categories = ScoreCategories(
            content_quality=self._content_quality(haystack),
            ats_compatibility=self._ats_compatibility(resume, haystack),
            completeness=self._completeness(resume),
            experience_quality=self._experience_quality(resume),
            professional_presence=self._professional_presence(resume),
        )

        weighted = sum(
            getattr(categories, name).score * weight
            for name, weight in ADVANCED_SCORE_WEIGHTS.items()
        )
        overall = round_half_up(weighted)

        logger.debug(f"Advanced score {overall} (weighted {weighted:.2f})")
        return AdvancedScoreBreakdown(overall_score=overall, categories=categories)

    def _content_quality(self, haystack: str) -> ScoreCategory:
        return _category({
            "keywordDensity": min(40, _count_hits(haystack, ALL_ATS_KEYWORDS) * 4),
            "actionVerbs": min(30, _count_hits(haystack, ACTION_VERBS) * 3),
            "quantifiableAchievements": min(30, _count_hits(haystack, QUANTIFIABLE_INDICATORS) * 2),
        })

    def _ats_compatibility(self, resume: ParsedResume, haystack: str) -> ScoreCategory:
        info = resume.personal_info
        # JSON escapes newlines, so a serialized haystack never passes this check
        consistent = "\n" in haystack and "\t" not in haystack
        sections_found = _count_hits(haystack, STANDARD_SECTIONS)
        no_graphics = not any(flag in haystack for flag in LAYOUT_RED_FLAGS)

        return _category({
            "formatConsistency": 25 if consistent else 0,
            "standardSections": sections_found / len(STANDARD_SECTIONS) * 25,
            "noTablesGraphics": 25 if no_graphics else 0,
            "contactInfoFormat": 25 if info.email and info.phone else 0,
        })

    def _completeness(self, resume: ParsedResume) -> ScoreCategory:
        info = resume.personal_info
        sections = [
            info.full_name,
            info.email,
            resume.skills,
            resume.work_experience,
            resume.education,
        ]
        contact = [info.full_name, info.email, info.phone]

        has_dates = any(job.start_date for job in resume.work_experience) or any(
            entry.start_date for entry in resume.education
        )
        has_descriptions = any(
            job.description and len(job.description) > 10 for job in resume.work_experience
        ) or bool(resume.summary and len(resume.summary) > 20)

        return _category({
            "allSectionsPresent": sum(1 for s in sections if s) / len(sections) * 40,
            "contactInfoComplete": sum(1 for c in contact if c) / len(contact) * 20,
            "datesProvided": 20 if has_dates else 0,
            "descriptionsProvided": 20 if has_descriptions else 0,
        })

    def _experience_quality(self, resume: ParsedResume) -> ScoreCategory:
        years = calculate_years_of_experience(resume.work_experience, self._today)
        has_achievements = any(
            job.description and "achieved" in job.description.lower()
            for job in resume.work_experience
        )

        return _category({
            "yearsOfExperience": min(40, years * 4),
            "careerProgression": 20 if len(resume.work_experience) > 1 else 0,
            "relevantSkills": 20 if len(resume.skills) >= 5 else 0,
            "achievementFocus": 20 if has_achievements else 0,
        })

    def _professional_presence(self, resume: ParsedResume) -> ScoreCategory:
        info = resume.personal_info
        email = info.email or ""
        professional_email = bool(email) and (
            any(domain in email for domain in PROFESSIONAL_EMAIL_DOMAINS) or "@" not in email
        )

        return _category({
            "linkedinProfile": 25 if info.linkedin_url else 0,
            "githubProfile": 25 if info.github_url else 0,
            "portfolioWebsite": 25 if info.portfolio_url else 0,
            "professionalEmail": 25 if professional_email else 0,
        })


def calculate_advanced_score(
    resume: ParsedResume, today: Optional[date] = None
) -> AdvancedScoreBreakdown:
    """Score ``resume`` across the five weighted categories."""
    return AdvancedScorer(today=today).score(resume)
