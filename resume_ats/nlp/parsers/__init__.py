"""
Resume section parsers for extracting structured information.

Each parser is responsible for one part of the ParsedResume record and
degrades to None or an empty list when nothing matches.
"""

from .contact_parser import ContactParser
from .summary_parser import SummaryParser
from .skills_parser import SkillsParser
from .experience_parser import DateRange, ExperienceParser
from .education_parser import EducationParser
from .certifications_parser import CertificationsParser

__all__ = [
    "ContactParser",
    "SummaryParser",
    "SkillsParser",
    "DateRange",
    "ExperienceParser",
    "EducationParser",
    "CertificationsParser",
]
