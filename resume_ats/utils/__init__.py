"""
Utility modules for resume-ats.

This package contains shared utilities used across the toolkit:
- config: Configuration management
- logger: Logging infrastructure
- constants: Keyword vocabularies, caps and weights
"""

from resume_ats.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    LOGS_DIR,
)
from resume_ats.utils.constants import (
    SUPPORTED_RESUME_FORMATS,
    SkillCategory,
)
from resume_ats.utils.logger import (
    setup_logging,
    get_logger,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "LOGS_DIR",
    # Constants
    "SUPPORTED_RESUME_FORMATS",
    "SkillCategory",
    # Logger
    "setup_logging",
    "get_logger",
    "log",
]
