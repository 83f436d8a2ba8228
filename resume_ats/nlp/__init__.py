"""
Resume text extraction pipeline.

Main Components:
- ResumeParser: orchestrates the field parsers into a ParsedResume
- sections: keyword-based section locator
- dates: date normalization helpers
- ExtractorFactory: document text extraction (PDF, DOCX, TXT)
- ContactParser, SummaryParser, SkillsParser, ExperienceParser,
  EducationParser, CertificationsParser: one parser per record field
"""

from .resume_parser import (
    EmptyResumeTextError,
    ResumeParser,
    ResumeParseResult,
    get_resume_parser,
    parse_resume,
)

from .sections import (
    NOT_FOUND,
    find_any_section_start,
    get_next_section_index,
)

from .dates import normalize_date

from .extractors import (
    ExtractorFactory,
    ExtractionResult,
    TextExtractionError,
    UnsupportedFileTypeError,
    extract_text_from_file,
)

from .parsers import (
    CertificationsParser,
    ContactParser,
    EducationParser,
    ExperienceParser,
    SkillsParser,
    SummaryParser,
)

__all__ = [
    # Main parser
    "EmptyResumeTextError",
    "ResumeParser",
    "ResumeParseResult",
    "get_resume_parser",
    "parse_resume",
    # Section locator and dates
    "NOT_FOUND",
    "find_any_section_start",
    "get_next_section_index",
    "normalize_date",
    # Extractors
    "ExtractorFactory",
    "ExtractionResult",
    "TextExtractionError",
    "UnsupportedFileTypeError",
    "extract_text_from_file",
    # Parsers
    "CertificationsParser",
    "ContactParser",
    "EducationParser",
    "ExperienceParser",
    "SkillsParser",
    "SummaryParser",
]
