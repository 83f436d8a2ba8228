"""
Logging infrastructure for resume-ats.

Uses Loguru for console and optional rotating file output.
"""

import sys
from typing import Any, Optional

from loguru import logger
from pydantic import ValidationError

from resume_ats.utils.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure application-wide logging.

    Sets up console logging and, when enabled, a rotating log file.

    Args:
        level: Overrides the configured level for this setup only
    """
    settings = get_settings()
    log_settings = settings.logging
    if level is not None:
        log_settings = log_settings.model_copy(update={"level": level})

    # Remove default handler
    logger.remove()

    # Security: diagnose=False outside development to keep resume text out of tracebacks
    enable_diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            level=log_settings.level,
            colorize=True,
            backtrace=True,
            diagnose=enable_diagnose,
        )

    if log_settings.file_output:
        log_file = log_settings.file_path
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format=log_settings.format,
            level=log_settings.level,
            rotation=log_settings.rotation,
            retention=log_settings.retention,
            compression="zip",
            backtrace=True,
            diagnose=enable_diagnose,
            enqueue=True,
        )

    logger.debug(f"Logging initialized - Level: {log_settings.level}")


def get_logger(name: str) -> Any:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name for the logger (typically __name__)

    Returns:
        A configured logger instance
    """
    return logger.bind(name=name)


# Module-level logger for quick access
log = logger


# Auto-setup on import so library callers get the configured sinks and level
try:
    setup_logging()
except ValidationError as e:
    logger.warning(f"Invalid logging settings, keeping default sink: {e}")
