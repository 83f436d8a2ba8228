"""
Education parser for resumes.

Walks the education section line by line, opening a new entry on degree
or institution lines and filling the open entry from the lines after it.
"""

import re
from typing import Optional

from resume_ats.data.models import Education
from resume_ats.nlp.sections import NOT_FOUND, find_any_section_start
from resume_ats.utils.constants import DEGREE_KEYWORDS, EDUCATION_KEYWORDS, MAX_EDUCATION
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)


class EducationParser:
    """Parser for extracting education entries from resume text."""

    INSTITUTION_PATTERN = re.compile(r"university|college|institute|school", re.IGNORECASE)
    YEAR_PATTERN = re.compile(r"\d{4}")

    # Section stops at whichever of these comes first after the header
    SECTION_STOP_WORDS = ("certification", "skills")

    def parse(self, text: str) -> list[Education]:
        """Return education entries in order of appearance, capped."""
        section = self._education_section(text)
        if section is None:
            return []

        entries = self._build_entries(section)

        # Coarse: the last year in the whole section only ever lands on entry 0
        years = self.YEAR_PATTERN.findall(section)
        if years and entries:
            entries[0] = entries[0].model_copy(update={"end_date": years[-1]})

        logger.debug(f"Education: {len(entries)} entries, {len(years)} years seen")
        return entries[:MAX_EDUCATION]

    def _education_section(self, text: str) -> Optional[str]:
        lower_text = text.lower()
        start = find_any_section_start(lower_text, EDUCATION_KEYWORDS)
        if start == NOT_FOUND:
            return None

        stops = [lower_text.find(word, start) for word in self.SECTION_STOP_WORDS]
        stops = [i for i in stops if i != NOT_FOUND]
        end = min(stops) if stops else len(text)
        return text[start:end]

    def _build_entries(self, section: str) -> list[Education]:
        entries: list[Education] = []
        is_open = False
        institution = ""
        degree = ""

        for line in (l.strip() for l in section.split("\n")):
            if not line:
                continue

            has_degree = any(keyword in line.lower() for keyword in DEGREE_KEYWORDS)
            is_institution = len(line) > 10 and bool(self.INSTITUTION_PATTERN.search(line))

            if has_degree or is_institution:
                # Fill the open entry when its slot is free, else start a new one
                if is_open and has_degree and not degree:
                    degree = line
                elif is_open and not has_degree and not institution:
                    institution = line
                else:
                    if is_open:
                        entries.append(Education(institution_name=institution, degree=degree))
                    is_open = True
                    institution, degree = ("", line) if has_degree else (line, "")
            elif is_open and len(line) > 5:
                if not institution:
                    institution = line
                elif not degree:
                    degree = line

        if is_open:
            entries.append(Education(institution_name=institution, degree=degree))
        return entries
