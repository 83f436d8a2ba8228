"""
Resume data models for resume-ats.

Defines the structured record produced by one parse of resume text.
"""

from typing import Any, Optional

from pydantic import Field

from resume_ats.utils.constants import SkillCategory

from .base import EmbeddedModel


class PersonalInfo(EmbeddedModel):
    """Contact block; at most one value per field, first match wins."""

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None


class Skill(EmbeddedModel):
    """A declared or inferred skill."""

    name: str
    category: SkillCategory = SkillCategory.GENERAL


class WorkExperience(EmbeddedModel):
    """One job block from the experience section."""

    company_name: str
    job_title: str
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: bool = False
    description: Optional[str] = None


class Education(EmbeddedModel):
    """One education entry."""

    institution_name: str = ""
    degree: str = ""
    field_of_study: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    gpa: Optional[str] = None


class Certification(EmbeddedModel):
    """A certification or license line."""

    name: str
    organization: Optional[str] = None
    date: Optional[str] = None


class ParsedResume(EmbeddedModel):
    """
    Structured record extracted from resume text.

    The record has no identity of its own. Replace it by re-parsing, or
    derive an edited copy with ``model_copy(update=...)``.
    """

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: Optional[str] = None
    skills: list[Skill] = Field(default_factory=list)
    work_experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Dump with camelCase keys, the shape persistence and exports consume."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize with camelCase keys; compact unless ``indent`` is given."""
        return self.model_dump_json(by_alias=True, indent=indent)

    def haystack(self) -> str:
        """Lowercased compact serialization used for keyword substring scans."""
        return self.to_json().lower()
