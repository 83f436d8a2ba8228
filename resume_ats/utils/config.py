"""
Configuration management for the resume-ats toolkit.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent
LOGS_DIR = ROOT_DIR / "logs"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = LOGS_DIR / "resume_ats.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = False


class ExtractionSettings(BaseSettings):
    """Document text extraction configuration."""

    model_config = SettingsConfigDict(env_prefix="EXTRACT_")

    # Refuse anything bigger than this before handing it to a PDF/DOCX library
    max_file_size_bytes: int = 50 * 1024 * 1024

    # pdfplumber output shorter than this triggers the pypdf fallback
    min_pdfplumber_chars: int = 50

    @field_validator("max_file_size_bytes")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        """Reject non-positive limits."""
        if v <= 0:
            raise ValueError("max_file_size_bytes must be positive")
        return v


class ExportSettings(BaseSettings):
    """Export formatter configuration."""

    model_config = SettingsConfigDict(env_prefix="EXPORT_")

    # Field values go into the ATS XML unescaped unless this is switched on
    xml_escape_values: bool = False
    json_indent: int = 2


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "resume-ats"
    version: str = "0.1.0"
    description: str = "Heuristic resume extraction and ATS scoring"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
