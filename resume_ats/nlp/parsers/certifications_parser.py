"""
Certifications parser for resumes.
"""

import re

from resume_ats.data.models import Certification
from resume_ats.nlp.sections import NOT_FOUND, block_window, find_any_section_start
from resume_ats.utils.constants import (
    CERTIFICATION_KEYWORDS,
    MAX_CERTIFICATIONS,
    SECTION_FALLBACK_WINDOW,
)
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)


class CertificationsParser:
    """Parser for extracting certifications from resume text."""

    YEAR_PATTERN = re.compile(r"\d{4}")

    def parse(self, text: str) -> list[Certification]:
        """One certification per line under the header, up to the next blank line."""
        start = find_any_section_start(text.lower(), CERTIFICATION_KEYWORDS)
        if start == NOT_FOUND:
            return []

        window = block_window(text, start, SECTION_FALLBACK_WINDOW)
        certifications = []
        for line in window.split("\n")[1:]:
            name = line.strip()
            if len(name) <= 5:
                continue
            year = self.YEAR_PATTERN.search(line)
            certifications.append(
                Certification(name=name, organization=None, date=year.group(0) if year else None)
            )

        logger.debug(f"Certifications: {len(certifications)} lines")
        return certifications[:MAX_CERTIFICATIONS]
