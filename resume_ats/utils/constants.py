"""
Application-wide constants for resume-ats.

Keyword vocabularies, section header keywords, collection caps and scoring
weights. Everything here is immutable and shared read-only across calls.
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


# =============================================================================
# File Types
# =============================================================================

SUPPORTED_RESUME_FORMATS: Final[tuple[str, ...]] = (
    ".pdf",
    ".docx",
    ".txt",
)


# =============================================================================
# Section Header Keywords
# =============================================================================

SUMMARY_KEYWORDS: Final[tuple[str, ...]] = (
    "professional summary", "summary", "objective", "profile", "about me", "about",
)

SUMMARY_END_KEYWORDS: Final[tuple[str, ...]] = (
    "experience", "work experience", "employment", "work history",
    "education", "skills", "certification", "projects",
)

SKILLS_KEYWORDS: Final[tuple[str, ...]] = (
    "skills", "technical skills", "core competencies", "expertise",
)

EXPERIENCE_KEYWORDS: Final[tuple[str, ...]] = (
    "experience", "work experience", "employment", "work history",
)

EXPERIENCE_END_KEYWORDS: Final[tuple[str, ...]] = (
    "education", "skills", "projects", "certification", "certifications",
)

EDUCATION_KEYWORDS: Final[tuple[str, ...]] = (
    "education", "academic", "qualifications",
)

CERTIFICATION_KEYWORDS: Final[tuple[str, ...]] = (
    "certification", "certificate", "licenses",
)

DEGREE_KEYWORDS: Final[tuple[str, ...]] = (
    "bachelor", "master", "phd", "doctorate", "associate", "diploma",
    "b.s.", "b.a.", "m.s.", "m.a.", "mba", "ph.d.",
)

US_STATE_CODES: Final[tuple[str, ...]] = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)


# =============================================================================
# Collection Caps
# =============================================================================

MAX_SUMMARY_LENGTH: Final[int] = 1000
MIN_SUMMARY_LENGTH: Final[int] = 20
MAX_SKILLS: Final[int] = 30
MAX_WORK_EXPERIENCE: Final[int] = 10
MAX_EXPERIENCE_BLOCKS: Final[int] = 20
MAX_EDUCATION: Final[int] = 5
MAX_CERTIFICATIONS: Final[int] = 10

# Window used when a skills/certifications block has no terminating blank line
SECTION_FALLBACK_WINDOW: Final[int] = 500


# =============================================================================
# Skill Vocabulary
# =============================================================================

class SkillCategory(str, Enum):
    """Category tag attached to every extracted skill."""

    GENERAL = "General"
    TECHNICAL = "Technical"


# Matched as plain substrings of the lowercased document
TECHNICAL_SKILLS: Final[tuple[str, ...]] = (
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php", "swift", "kotlin",
    "react", "angular", "vue", "node", "express", "django", "flask", "spring", "asp.net",
    "html", "css", "sass", "tailwind", "bootstrap", "sql", "mongodb", "postgresql", "mysql",
    "aws", "azure", "gcp", "docker", "kubernetes", "git", "jenkins", "ci/cd", "agile", "scrum",
    "rest", "api", "graphql", "microservices", "tensorflow", "pytorch", "machine learning", "ai",
    "data analysis", "excel", "tableau", "power bi", "figma", "sketch", "photoshop",
)


# =============================================================================
# Scoring Vocabularies
# =============================================================================

ATS_KEYWORDS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "technical": (
        "javascript", "python", "java", "react", "node.js", "sql", "aws", "docker", "kubernetes",
        "machine learning", "data analysis", "agile", "scrum", "devops", "ci/cd", "api", "rest",
        "graphql", "microservices", "cloud computing", "database", "frontend", "backend", "full stack",
    ),
    "marketing": (
        "seo", "sem", "ppc", "social media", "content marketing", "email marketing", "analytics",
        "google analytics", "campaign management", "brand management", "digital marketing", "crm",
        "lead generation", "conversion optimization", "a/b testing", "market research",
    ),
    "sales": (
        "lead generation", "sales pipeline", "crm", "salesforce", "cold calling", "prospecting",
        "negotiation", "account management", "territory management", "quota achievement",
        "client relations", "sales strategy", "revenue growth", "customer acquisition",
    ),
    "finance": (
        "financial analysis", "budgeting", "forecasting", "financial modeling", "excel", "quickbooks",
        "gaap", "financial reporting", "risk management", "investment analysis", "audit", "tax",
        "accounting", "financial planning", "cash flow", "p&l",
    ),
    "healthcare": (
        "patient care", "medical records", "hipaa", "clinical", "diagnosis", "treatment", "medication",
        "healthcare", "nursing", "pharmacy", "medical coding", "icd-10", "cpt", "healthcare management",
    ),
})

# Flattened across industries; terms listed under two industries appear twice
ALL_ATS_KEYWORDS: Final[tuple[str, ...]] = tuple(
    keyword for keywords in ATS_KEYWORDS.values() for keyword in keywords
)

ACTION_VERBS: Final[tuple[str, ...]] = (
    "achieved", "increased", "decreased", "improved", "developed", "created", "implemented",
    "managed", "led", "coordinated", "designed", "built", "optimized", "streamlined",
    "reduced", "enhanced", "delivered", "executed", "launched", "established", "generated",
    "produced", "facilitated", "initiated", "collaborated", "mentored", "trained", "supervised",
)

QUANTIFIABLE_INDICATORS: Final[tuple[str, ...]] = (
    "%", "$", "increase", "decrease", "revenue", "profit", "cost", "time", "efficiency",
    "customers", "users", "clients", "projects", "team", "budget", "sales", "growth",
    "reduction", "improvement", "uptime", "performance", "satisfaction", "score",
)

STANDARD_SECTIONS: Final[tuple[str, ...]] = ("experience", "education", "skills", "summary")

LAYOUT_RED_FLAGS: Final[tuple[str, ...]] = ("table", "figure", "chart")

PROFESSIONAL_EMAIL_DOMAINS: Final[tuple[str, ...]] = ("@gmail.com", "@outlook.com")

# Subsets used by the export suggestions, checked against the summary only
SUMMARY_ACTION_VERBS: Final[tuple[str, ...]] = (
    "achieved", "improved", "increased", "developed", "managed",
)
SUMMARY_QUANTIFIERS: Final[tuple[str, ...]] = (
    "%", "$", "increased", "decreased", "improved",
)


# =============================================================================
# Scoring Weights
# =============================================================================

CONFIDENCE_WEIGHTS: Final[Mapping[str, int]] = MappingProxyType({
    "full_name": 15,
    "email": 15,
    "phone": 10,
    "skills": 20,
    "work_experience": 25,
    "education": 15,
})

# Points awarded per collected entry, before the per-field cap
CONFIDENCE_PER_ITEM: Final[Mapping[str, int]] = MappingProxyType({
    "skills": 2,
    "work_experience": 8,
    "education": 7,
})

ADVANCED_SCORE_WEIGHTS: Final[Mapping[str, float]] = MappingProxyType({
    "content_quality": 0.30,
    "ats_compatibility": 0.25,
    "completeness": 0.20,
    "experience_quality": 0.15,
    "professional_presence": 0.10,
})
