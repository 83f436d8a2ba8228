"""
Summary/objective/profile parser for resumes.
"""

import re
from typing import Optional

from resume_ats.nlp.sections import NOT_FOUND, find_section_header, section_end
from resume_ats.utils.constants import (
    MAX_SUMMARY_LENGTH,
    MIN_SUMMARY_LENGTH,
    SUMMARY_END_KEYWORDS,
    SUMMARY_KEYWORDS,
)
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)


class SummaryParser:
    """Parser for extracting the professional summary from resume text."""

    LEADING_NOISE = re.compile(r"^[\s:\-•]+")
    EXCESS_NEWLINES = re.compile(r"\n{3,}")

    def parse(self, text: str) -> Optional[str]:
        """
        Return the summary paragraph, or None when absent or too short.

        The window runs from the end of the earliest summary keyword to the
        next section keyword.
        """
        lower_text = text.lower()
        start, matched = find_section_header(lower_text, SUMMARY_KEYWORDS)
        if start == NOT_FOUND:
            return None

        content_start = start + len(matched)
        end = section_end(lower_text, content_start, SUMMARY_END_KEYWORDS)

        cleaned = text[content_start:end].strip()
        cleaned = self.LEADING_NOISE.sub("", cleaned)
        cleaned = self.EXCESS_NEWLINES.sub("\n\n", cleaned)
        cleaned = cleaned.strip()[:MAX_SUMMARY_LENGTH]

        if len(cleaned) <= MIN_SUMMARY_LENGTH:
            logger.debug(f"Discarding {len(cleaned)}-char summary as noise")
            return None
        return cleaned
