"""
Main resume parser orchestrator.

Coordinates the field parsers to turn resume text into a ParsedResume and
attaches the confidence score.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from resume_ats.core.scoring.confidence import calculate_confidence_score
from resume_ats.data.models import ParsedResume
from resume_ats.utils.logger import get_logger

from .extractors import extract_text, extract_text_from_file
from .parsers import (
    CertificationsParser,
    ContactParser,
    EducationParser,
    ExperienceParser,
    SkillsParser,
    SummaryParser,
)

logger = get_logger(__name__)


class EmptyResumeTextError(ValueError):
    """Raised before parsing when the extracted text is empty or whitespace."""


EMPTY_TEXT_MESSAGE = (
    "No text could be extracted from the file. "
    "Please ensure the file contains readable text."
)


@dataclass
class ResumeParseResult:
    """A parsed record plus the metadata the caller persists alongside it."""

    resume: ParsedResume
    confidence_score: int
    raw_text: str = ""
    file_path: Optional[str] = None
    processing_time_ms: int = 0
    warnings: list[str] = field(default_factory=list)


class ResumeParser:
    """
    Resume parser that runs every field parser over the same text.

    Pipeline:
    1. Split the text into non-empty trimmed lines
    2. Extract contact information
    3. Extract the summary
    4. Extract declared and inferred skills
    5. Extract work experience
    6. Extract education
    7. Extract certifications

    Parsers hold no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self):
        """Initialize the resume parser with all component parsers."""
        self.contact_parser = ContactParser()
        self.summary_parser = SummaryParser()
        self.skills_parser = SkillsParser()
        self.experience_parser = ExperienceParser()
        self.education_parser = EducationParser()
        self.certifications_parser = CertificationsParser()

    def parse(self, text: str) -> ParsedResume:
        """
        Build the structured record for ``text``.

        Never raises for string input; anything not found is None or empty.
        """
        lines = [line.strip() for line in text.split("\n") if line.strip()]

        return ParsedResume(
            personal_info=self.contact_parser.parse(text, lines),
            summary=self.summary_parser.parse(text),
            skills=self.skills_parser.parse(text),
            work_experience=self.experience_parser.parse(text),
            education=self.education_parser.parse(text),
            certifications=self.certifications_parser.parse(text),
        )

    def parse_text(self, text: str, file_path: Optional[str] = None) -> ResumeParseResult:
        """
        Parse already extracted text and score it.

        Raises:
            EmptyResumeTextError: ``text`` is empty or whitespace only
        """
        if not text or not text.strip():
            raise EmptyResumeTextError(EMPTY_TEXT_MESSAGE)

        start_time = time.time()
        resume = self.parse(text)
        score = calculate_confidence_score(resume)

        result = ResumeParseResult(
            resume=resume,
            confidence_score=score,
            raw_text=text,
            file_path=file_path,
            processing_time_ms=int((time.time() - start_time) * 1000),
        )
        if not resume.work_experience:
            result.warnings.append("No work experience section detected")
        if not resume.personal_info.email:
            result.warnings.append("No email address found")

        logger.info(
            f"Parsed resume: {len(resume.skills)} skills, "
            f"{len(resume.work_experience)} jobs, {len(resume.education)} education, "
            f"{len(resume.certifications)} certifications, confidence {score}"
        )
        return result

    def parse_file(self, file_path: str | Path) -> ResumeParseResult:
        """Extract text from a PDF/DOCX/TXT file and parse it."""
        return self.parse_text(extract_text(file_path), file_path=str(file_path))

    async def parse_file_async(self, file_path: str | Path) -> ResumeParseResult:
        """Await text extraction, then parse synchronously."""
        text = await extract_text_from_file(file_path)
        return self.parse_text(text, file_path=str(file_path))


# Singleton instance
_resume_parser: Optional[ResumeParser] = None


def get_resume_parser() -> ResumeParser:
    """Get the resume parser singleton instance."""
    global _resume_parser
    if _resume_parser is None:
        _resume_parser = ResumeParser()
    return _resume_parser


def parse_resume(text: str) -> ParsedResume:
    """Parse resume text into a ParsedResume."""
    return get_resume_parser().parse(text)
