"""
ATS-oriented export formats: plain text, XML and keyword-annotated JSON.

Section order, headers and placeholder strings are fixed so that files
exported earlier stay comparable with new ones.
"""

import html
from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import Field

from resume_ats.data.models import EmbeddedModel, ParsedResume
from resume_ats.utils.config import get_settings
from resume_ats.utils.constants import (
    ALL_ATS_KEYWORDS,
    SUMMARY_ACTION_VERBS,
    SUMMARY_QUANTIFIERS,
)
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)

# Below this share of the vocabulary the keyword suggestion is emitted
MIN_KEYWORD_RATIO = 0.1
MIN_SUMMARY_SUGGESTION_LENGTH = 50


class ATSExportData(EmbeddedModel):
    """Resume wrapped with ATS keywords and optimization suggestions."""

    resume: ParsedResume
    file_name: str
    ats_keywords: list[str] = Field(default_factory=list)
    optimization_suggestions: list[str] = Field(default_factory=list)
    export_date: str

    def to_json(self, indent: Optional[int] = None) -> str:
        if indent is None:
            indent = get_settings().export.json_indent
        return self.model_dump_json(by_alias=True, indent=indent)


def _timestamp(export_date: Optional[datetime]) -> str:
    """UTC ISO-8601 with milliseconds and a trailing Z."""
    moment = export_date or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def export_as_ats_plain_text(resume: ParsedResume, file_name: str = "") -> str:
    """Render the record as plain text with fixed section headers."""
    info = resume.personal_info
    out = [
        f"{info.full_name or 'Name Not Provided'}\n",
        f"{info.email or 'Email Not Provided'}\n",
        f"{info.phone or 'Phone Not Provided'}\n",
    ]
    if info.location:
        out.append(f"{info.location}\n")
    out.append("\n")

    if resume.summary:
        out.append("PROFESSIONAL SUMMARY\n")
        out.append(f"{resume.summary}\n\n")

    if resume.work_experience:
        out.append("WORK EXPERIENCE\n")
        for index, job in enumerate(resume.work_experience):
            out.append(f"{job.job_title}\n")
            out.append(f"{job.company_name}\n")
            if job.location:
                out.append(f"{job.location}\n")
            end = "Present" if job.is_current else job.end_date or "End Date Not Provided"
            out.append(f"{job.start_date or 'Start Date Not Provided'} - {end}\n")
            if job.description:
                out.append(f"{job.description}\n")
            if index < len(resume.work_experience) - 1:
                out.append("\n")
        out.append("\n")

    if resume.education:
        out.append("EDUCATION\n")
        for index, entry in enumerate(resume.education):
            out.append(f"{entry.degree}\n")
            out.append(f"{entry.institution_name}\n")
            if entry.field_of_study:
                out.append(f"{entry.field_of_study}\n")
            if entry.location:
                out.append(f"{entry.location}\n")
            if entry.start_date or entry.end_date:
                out.append(
                    f"{entry.start_date or 'Start Date Not Provided'} - "
                    f"{entry.end_date or 'End Date Not Provided'}\n"
                )
            if entry.gpa:
                out.append(f"GPA: {entry.gpa}\n")
            if index < len(resume.education) - 1:
                out.append("\n")
        out.append("\n")

    if resume.skills:
        out.append("SKILLS\n")
        by_category: dict[str, list[str]] = {}
        for skill in resume.skills:
            by_category.setdefault(skill.category or "General", []).append(skill.name)
        for category, names in by_category.items():
            out.append(f"{category}: {', '.join(names)}\n")
        out.append("\n")

    if resume.certifications:
        out.append("CERTIFICATIONS\n")
        for cert in resume.certifications:
            line = cert.name
            if cert.organization:
                line += f" - {cert.organization}"
            if cert.date:
                line += f" ({cert.date})"
            out.append(f"{line}\n")

    return "".join(out).strip()


def export_as_ats_xml(
    resume: ParsedResume,
    file_name: str = "",
    export_date: Optional[datetime] = None,
    escape_values: Optional[bool] = None,
) -> str:
    """
    Render the record in the fixed ATS-XML schema.

    Field values are interpolated as-is by default, so ``<``, ``>`` or ``&``
    inside a value produce malformed XML. Pass ``escape_values=True`` (or set
    ``EXPORT_XML_ESCAPE_VALUES``) when the input is untrusted.
    """
    if escape_values is None:
        escape_values = get_settings().export.xml_escape_values
    v: Callable[[Optional[str]], str] = (
        (lambda value: html.escape(value or "", quote=False)) if escape_values else (lambda value: value or "")
    )
    info = resume.personal_info

    positions = "".join(
        f"""
    <position>
      <jobTitle>{v(job.job_title)}</jobTitle>
      <companyName>{v(job.company_name)}</companyName>
      <location>{v(job.location)}</location>
      <startDate>{v(job.start_date)}</startDate>
      <endDate>{v(job.end_date)}</endDate>
      <isCurrent>{str(job.is_current).lower()}</isCurrent>
      <description>{v(job.description)}</description>
    </position>"""
        for job in resume.work_experience
    )

    degrees = "".join(
        f"""
    <degree>
      <institutionName>{v(entry.institution_name)}</institutionName>
      <degree>{v(entry.degree)}</degree>
      <fieldOfStudy>{v(entry.field_of_study)}</fieldOfStudy>
      <location>{v(entry.location)}</location>
      <startDate>{v(entry.start_date)}</startDate>
      <endDate>{v(entry.end_date)}</endDate>
      <gpa>{v(entry.gpa)}</gpa>
    </degree>"""
        for entry in resume.education
    )

    skills = "".join(
        f"""
    <skill>
      <name>{v(skill.name)}</name>
      <category>{v(skill.category or 'General')}</category>
    </skill>"""
        for skill in resume.skills
    )

    certifications = "".join(
        f"""
    <certification>
      <name>{v(cert.name)}</name>
      <organization>{v(cert.organization)}</organization>
      <date>{v(cert.date)}</date>
    </certification>"""
        for cert in resume.certifications
    )

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<resume>
  <metadata>
    <fileName>{v(file_name)}</fileName>
    <exportDate>{_timestamp(export_date)}</exportDate>
    <format>ATS-XML</format>
  </metadata>

  <personalInformation>
    <fullName>{v(info.full_name)}</fullName>
    <email>{v(info.email)}</email>
    <phone>{v(info.phone)}</phone>
    <location>{v(info.location)}</location>
    <linkedinUrl>{v(info.linkedin_url)}</linkedinUrl>
    <githubUrl>{v(info.github_url)}</githubUrl>
    <portfolioUrl>{v(info.portfolio_url)}</portfolioUrl>
  </personalInformation>

  <professionalSummary>
    <summary>{v(resume.summary)}</summary>
  </professionalSummary>

  <workExperience>
    {positions}
  </workExperience>

  <education>
    {degrees}
  </education>

  <skills>
    {skills}
  </skills>

  <certifications>
    {certifications}
  </certifications>
</resume>"""


def find_ats_keywords(resume: ParsedResume) -> list[str]:
    """Vocabulary keywords found in the serialized record, in vocabulary order, with repeats."""
    haystack = resume.haystack()
    return [keyword for keyword in ALL_ATS_KEYWORDS if keyword.lower() in haystack]


def generate_optimization_suggestions(resume: ParsedResume, found_keywords: list[str]) -> list[str]:
    """Advisory strings, each triggered by one independent condition, in fixed order."""
    info = resume.personal_info
    suggestions = []

    if not info.full_name:
        suggestions.append("Add a full name to improve ATS compatibility")
    if not info.email:
        suggestions.append("Include an email address for contact")
    if not info.phone:
        suggestions.append("Add a phone number for better contact options")

    if not resume.skills:
        suggestions.append("Add a skills section with relevant technical and soft skills")
    if not resume.work_experience:
        suggestions.append("Include work experience to show career progression")
    if not resume.education:
        suggestions.append("Add education information to complete your profile")

    if not resume.summary or len(resume.summary) < MIN_SUMMARY_SUGGESTION_LENGTH:
        suggestions.append("Add a compelling professional summary (50+ characters)")

    summary_text = (resume.summary or "").lower()
    if not any(verb in summary_text for verb in SUMMARY_ACTION_VERBS):
        suggestions.append("Use action verbs (achieved, improved, increased) to describe accomplishments")
    if not any(indicator in summary_text for indicator in SUMMARY_QUANTIFIERS):
        suggestions.append("Include quantifiable achievements with numbers and percentages")

    if not (info.linkedin_url or info.github_url or info.portfolio_url):
        suggestions.append("Add LinkedIn, GitHub, or portfolio URL to enhance online presence")

    if len(found_keywords) / len(ALL_ATS_KEYWORDS) < MIN_KEYWORD_RATIO:
        suggestions.append("Include more industry-specific keywords to improve ATS matching")

    return suggestions


def export_as_enhanced_json(
    resume: ParsedResume,
    file_name: str = "",
    export_date: Optional[datetime] = None,
) -> ATSExportData:
    """Wrap the record with its ATS keywords and optimization suggestions."""
    found = find_ats_keywords(resume)
    suggestions = generate_optimization_suggestions(resume, found)

    logger.debug(f"Enhanced export: {len(set(found))} keywords, {len(suggestions)} suggestions")
    return ATSExportData(
        resume=resume,
        file_name=file_name,
        ats_keywords=list(dict.fromkeys(found)),
        optimization_suggestions=suggestions,
        export_date=_timestamp(export_date),
    )
