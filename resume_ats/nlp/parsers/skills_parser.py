"""
Skills parser for resumes.

Collects the declared skills list and then infers technical skills from a
fixed vocabulary found anywhere in the document.
"""

import re

from resume_ats.data.models import Skill
from resume_ats.nlp.sections import NOT_FOUND, block_window, find_any_section_start
from resume_ats.utils.constants import (
    MAX_SKILLS,
    SECTION_FALLBACK_WINDOW,
    SKILLS_KEYWORDS,
    TECHNICAL_SKILLS,
    SkillCategory,
)
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)


class SkillsParser:
    """
    Parser for extracting skills from resume text.

    Technical skills are matched as raw substrings, so "java" is also
    inferred from "javascript" and "ai" from words like "maintained".
    """

    SEPARATORS = re.compile(r"[,;|•·]")

    def parse(self, text: str) -> list[Skill]:
        """Return declared skills followed by inferred ones, capped."""
        lower_text = text.lower()
        skills = self._declared_skills(text, lower_text)
        declared = len(skills)
        skills.extend(self._inferred_skills(lower_text, skills))

        logger.debug(f"Skills: {declared} declared, {len(skills) - declared} inferred")
        return skills[:MAX_SKILLS]

    def _declared_skills(self, text: str, lower_text: str) -> list[Skill]:
        """Tokens listed under the first skills header, up to the next blank line."""
        start = find_any_section_start(lower_text, SKILLS_KEYWORDS)
        if start == NOT_FOUND:
            return []

        window = block_window(text, start, SECTION_FALLBACK_WINDOW)
        skills = []
        for line in window.split("\n")[1:]:
            for token in self.SEPARATORS.split(line):
                name = token.strip()
                if 1 < len(name) < 50:
                    skills.append(Skill(name=name, category=SkillCategory.GENERAL))
        return skills

    def _inferred_skills(self, lower_text: str, existing: list[Skill]) -> list[Skill]:
        seen = {skill.name.lower() for skill in existing}
        inferred = []
        for term in TECHNICAL_SKILLS:
            if term in lower_text and term not in seen:
                inferred.append(Skill(name=term[0].upper() + term[1:], category=SkillCategory.TECHNICAL))
                seen.add(term)
        return inferred
