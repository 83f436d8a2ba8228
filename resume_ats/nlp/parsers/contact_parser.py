"""
Contact information parser for resumes.

Extracts the name, email, phone number, profile URLs and location.
"""

import re
from typing import Optional

from resume_ats.data.models import PersonalInfo
from resume_ats.utils.constants import US_STATE_CODES
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)


class ContactParser:
    """Parser for extracting contact information from resume text."""

    EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+")

    # North American style, optional country code and parentheses
    PHONE_PATTERN = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

    LINKEDIN_PATTERN = re.compile(
        r"(?:https?://)?(?:www\.)?linkedin\.com/in/[a-zA-Z0-9_-]+",
        re.IGNORECASE,
    )

    GITHUB_PATTERN = re.compile(
        r"(?:https?://)?(?:www\.)?github\.com/[a-zA-Z0-9_-]+",
        re.IGNORECASE,
    )

    URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)

    # Anywhere in the URL, not only at the end
    WEB_TLD_PATTERN = re.compile(r"\.(?:com|net|io|dev)")

    # Case-sensitive on purpose: "in" or "or" must not read as a state
    STATE_PATTERN = re.compile(r"\b(?:" + "|".join(US_STATE_CODES) + r")\b")
    ZIP_PATTERN = re.compile(r"\d{5}")

    # Location is only looked for near the top of the document
    LOCATION_SCAN_LINES = 5

    def parse(self, text: str, lines: Optional[list[str]] = None) -> PersonalInfo:
        """
        Parse contact information from resume text.

        Args:
            text: Full resume text
            lines: Non-empty trimmed lines of ``text``; computed when omitted

        Returns:
            PersonalInfo where every field that did not match is None
        """
        if lines is None:
            lines = [line.strip() for line in text.split("\n") if line.strip()]

        linkedin = self._first_match(self.LINKEDIN_PATTERN, text)
        github = self._first_match(self.GITHUB_PATTERN, text)

        info = PersonalInfo(
            full_name=lines[0] if lines else None,
            email=self._first_match(self.EMAIL_PATTERN, text),
            phone=self._first_match(self.PHONE_PATTERN, text),
            location=self._extract_location(lines),
            linkedin_url=linkedin,
            github_url=github,
            portfolio_url=self._extract_portfolio(text),
        )

        logger.debug(
            f"Contact fields found: "
            f"{[k for k, v in info.model_dump().items() if v is not None]}"
        )
        return info

    @staticmethod
    def _first_match(pattern: re.Pattern, text: str) -> Optional[str]:
        match = pattern.search(text)
        return match.group(0) if match else None

    def _extract_portfolio(self, text: str) -> Optional[str]:
        """First http(s) URL that is not a LinkedIn/GitHub profile and looks personal."""
        for url in self.URL_PATTERN.findall(text):
            if "linkedin.com" in url or "github.com" in url:
                continue
            if "portfolio" in url or "personal" in url or self.WEB_TLD_PATTERN.search(url):
                return url
        return None

    def _extract_location(self, lines: list[str]) -> Optional[str]:
        """First of the top lines with a comma plus a state code or ZIP."""
        for line in lines[: self.LOCATION_SCAN_LINES]:
            if "," in line and (
                self.STATE_PATTERN.search(line) or self.ZIP_PATTERN.search(line)
            ):
                return line
        return None
