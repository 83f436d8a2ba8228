"""
Work experience parser for resumes.

Splits the experience section into blank-line separated blocks and reads
title, company, dates, location and description out of each block.
"""

import re
from dataclasses import dataclass
from typing import Optional

from resume_ats.data.models import WorkExperience
from resume_ats.nlp.dates import DATE_RANGE_PATTERN, ONGOING_PATTERN, normalize_date
from resume_ats.nlp.sections import (
    NOT_FOUND,
    find_section_header,
    header_body_start,
    section_end,
)
from resume_ats.utils.constants import (
    EXPERIENCE_END_KEYWORDS,
    EXPERIENCE_KEYWORDS,
    MAX_EXPERIENCE_BLOCKS,
    MAX_WORK_EXPERIENCE,
)
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DateRange:
    """Dates read from a job block."""

    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: bool = False


class ExperienceParser:
    """Parser for extracting work experience from resume text."""

    BLOCK_SEPARATOR = re.compile(r"\n\s*\n+")

    HEADER_SEPARATOR = re.compile(r" [@\-–—] | \| ")

    TITLE_KEYWORDS = re.compile(
        r"engineer|developer|manager|lead|director|analyst|consultant|designer|architect",
        re.IGNORECASE,
    )

    # "City, State", a bare two-letter code (optionally with ZIP), or a ZIP
    LOCATION_PATTERN = re.compile(
        r"[A-Z][a-zA-Z]+\s*,\s*[A-Z][a-zA-Z]+|\b[A-Z]{2}\b(?:\s*\d{5})?|\d{5}"
    )

    BULLET_PREFIX = re.compile(r"^[\s\-•]+")

    def parse(self, text: str) -> list[WorkExperience]:
        """Return job entries in the order they appear, capped."""
        section = self._experience_section(text)
        if section is None:
            return []

        blocks = [b.strip() for b in self.BLOCK_SEPARATOR.split(section)]
        blocks = [b for b in blocks if b][:MAX_EXPERIENCE_BLOCKS]

        experiences = []
        for block in blocks:
            entry = self._parse_block(block)
            if entry is not None:
                experiences.append(entry)

        logger.debug(f"Experience: {len(blocks)} blocks, {len(experiences)} entries")
        return experiences[:MAX_WORK_EXPERIENCE]

    def _experience_section(self, text: str) -> Optional[str]:
        """Text after the experience header, up to the next section keyword."""
        lower_text = text.lower()
        start, keyword = find_section_header(lower_text, EXPERIENCE_KEYWORDS)
        if start == NOT_FOUND:
            return None

        end = section_end(lower_text, start, EXPERIENCE_END_KEYWORDS)
        body_start = min(header_body_start(text, start, keyword), end)
        return text[body_start:end]

    def _parse_block(self, block: str) -> Optional[WorkExperience]:
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        if not lines:
            return None

        header, rest = lines[0], lines[1:]
        dates = self._extract_dates(block)
        job_title, company_name = self._split_header(header, rest)
        description = self._extract_description(rest)

        if not (job_title or company_name or description or dates.start_date):
            return None

        return WorkExperience(
            company_name=company_name or "Unknown Company",
            job_title=job_title or "Unknown Position",
            location=self._extract_location(lines),
            start_date=dates.start_date,
            end_date=dates.end_date,
            is_current=dates.is_current,
            description=description,
        )

    def _extract_dates(self, block: str) -> DateRange:
        match = DATE_RANGE_PATTERN.search(block)
        if not match:
            return DateRange()

        if ONGOING_PATTERN.search(match.group(2)):
            return DateRange(start_date=normalize_date(match.group(1)), is_current=True)

        return DateRange(
            start_date=normalize_date(match.group(1)),
            end_date=normalize_date(match.group(2)),
        )

    def _split_header(self, header: str, rest: list[str]) -> tuple[str, str]:
        """
        Return (job_title, company_name) for a block header.

        A header of exactly two parts is split on its separator and the part
        that looks like a title wins; anything else is all title, with the
        next line taken as the company.
        """
        parts = self.HEADER_SEPARATOR.split(header)
        if len(parts) != 2:
            return header, rest[0] if rest else ""

        first, second = parts[0].strip(), parts[1].strip()
        first_is_title = bool(self.TITLE_KEYWORDS.search(first))
        second_is_title = bool(self.TITLE_KEYWORDS.search(second))
        if second_is_title and not first_is_title:
            return second, first
        return first, second

    def _extract_location(self, lines: list[str]) -> Optional[str]:
        for line in lines:
            match = self.LOCATION_PATTERN.search(line)
            if match:
                return match.group(0)
        return None

    def _extract_description(self, rest: list[str]) -> Optional[str]:
        body = [
            self.BULLET_PREFIX.sub("", line)
            for line in rest
            if not DATE_RANGE_PATTERN.search(line)
        ]
        description = "\n".join(body).strip()
        return description or None
