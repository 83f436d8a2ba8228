"""
Shared test fixtures for the resume-ats test suite.

Sets environment variables before any package imports so settings load in
testing mode, then provides sample resume text and a ParsedResume factory.
"""

import os

# === Set environment BEFORE any resume_ats imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")

from typing import Any, Optional

import pytest

from resume_ats.data.models import (
    Certification,
    Education,
    ParsedResume,
    PersonalInfo,
    Skill,
    WorkExperience,
)


# ---------------------------------------------------------------------------
# Sample resume text
# ---------------------------------------------------------------------------


@pytest.fixture
def jane_doe_text() -> str:
    """Minimal resume with skills, one job and one degree."""
    return (
        "Jane Doe\n"
        "jane@x.com\n"
        "555-123-4567\n"
        "SKILLS\n"
        "Python, SQL, Docker\n"
        "\n"
        "EXPERIENCE\n"
        "Software Engineer - Acme Corp\n"
        "Jan 2020 - Present\n"
        "Built things.\n"
        "\n"
        "EDUCATION\n"
        "Bachelor of Science\n"
        "State University\n"
        "2019"
    )


@pytest.fixture
def full_resume_text() -> str:
    """Resume exercising every section the parser knows about."""
    return (
        "John Smith\n"
        "Austin, TX 78701\n"
        "john.smith@gmail.com | (512) 555-0199\n"
        "https://linkedin.com/in/johnsmith\n"
        "https://github.com/jsmith\n"
        "https://johnsmith.dev\n"
        "\n"
        "Professional Summary\n"
        "Backend engineer who improved API latency by 40% and managed a team of five.\n"
        "\n"
        "Work Experience\n"
        "Senior Developer @ Globex\n"
        "03/2019 - Present\n"
        "- Achieved 99.9% uptime for payment services\n"
        "- Led migration to Kubernetes\n"
        "\n"
        "Initech | Software Engineer\n"
        "2015 to 2019\n"
        "• Built internal reporting tools\n"
        "\n"
        "Education\n"
        "Master of Science in Computer Science\n"
        "University of Texas\n"
        "2014\n"
        "\n"
        "Certifications\n"
        "AWS Certified Solutions Architect 2021\n"
        "Certified Kubernetes Administrator\n"
    )


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_parsed_resume():
    """Factory that returns a callable to build ParsedResume records."""

    def _factory(
        personal_info: Optional[dict[str, Any]] = None,
        summary: Optional[str] = "Experienced engineer who improved delivery speed across teams.",
        skills: Optional[list[dict[str, Any]]] = None,
        work_experience: Optional[list[dict[str, Any]]] = None,
        education: Optional[list[dict[str, Any]]] = None,
        certifications: Optional[list[dict[str, Any]]] = None,
    ) -> ParsedResume:
        if personal_info is None:
            personal_info = {
                "full_name": "Jane Smith",
                "email": "jane.smith@example.com",
                "phone": "555-010-0100",
                "location": "San Francisco, CA",
                "linkedin_url": "https://linkedin.com/in/janesmith",
                "github_url": "https://github.com/janesmith",
                "portfolio_url": None,
            }
        if skills is None:
            skills = [
                {"name": "Python", "category": "General"},
                {"name": "Docker", "category": "Technical"},
            ]
        if work_experience is None:
            work_experience = [
                {
                    "company_name": "TechCorp",
                    "job_title": "Senior Software Engineer",
                    "location": "San Francisco, CA",
                    "start_date": "2018-01",
                    "end_date": "2020-01",
                    "is_current": False,
                    "description": "Designed REST APIs",
                },
            ]
        if education is None:
            education = [
                {
                    "institution_name": "MIT",
                    "degree": "Bachelor of Science",
                    "end_date": "2017",
                },
            ]

        return ParsedResume(
            personal_info=PersonalInfo(**personal_info),
            summary=summary,
            skills=[Skill(**s) for s in skills],
            work_experience=[WorkExperience(**w) for w in work_experience],
            education=[Education(**e) for e in education],
            certifications=[Certification(**c) for c in certifications or []],
        )

    return _factory


@pytest.fixture
def empty_resume() -> ParsedResume:
    """Record where nothing was extracted."""
    return ParsedResume()
