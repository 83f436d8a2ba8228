"""
Base extractor class for document text extraction.

Turning PDF/DOCX/TXT files into plain text sits outside the parsing core;
these extractors are the thin adapter the CLI and ``ResumeParser`` use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from resume_ats.utils.config import get_settings


class UnsupportedFileTypeError(ValueError):
    """The file extension has no registered extractor."""


class TextExtractionError(RuntimeError):
    """A document library failed to produce text."""


@dataclass
class ExtractionResult:
    """Result of text extraction from a document."""

    text: str
    page_count: int = 1
    metadata: dict = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    success: bool = True
    error_message: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Check if extraction resulted in empty text."""
        return len(self.text.strip()) == 0


class BaseExtractor(ABC):
    """
    Abstract base class for document text extractors.

    All format-specific extractors should inherit from this class.
    """

    # Label used in "Failed to extract text from <label>" messages
    format_label: str = "file"

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., '.pdf', '.docx')."""

    def can_extract(self, file_path: str | Path) -> bool:
        """Check if this extractor can handle the given file."""
        return Path(file_path).suffix.lower() in self.supported_extensions

    def extract(self, file_path: str | Path) -> ExtractionResult:
        """Extract text from a file on disk."""
        try:
            path = self._validate_file(file_path)
            return self.extract_from_bytes(path.read_bytes(), path.name)
        except (OSError, ValueError) as e:
            return self._create_error_result(e)

    @abstractmethod
    def extract_from_bytes(self, content: bytes, filename: str = "document") -> ExtractionResult:
        """
        Extract text content from document bytes.

        Args:
            content: Raw bytes of the document
            filename: Original filename (for extension detection)

        Returns:
            ExtractionResult containing the extracted text and metadata
        """

    def _validate_file(self, file_path: str | Path) -> Path:
        """Validate that the file exists, is a regular file and is not oversized."""
        path = Path(file_path).resolve(strict=False)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        max_size = get_settings().extraction.max_file_size_bytes
        size = path.stat().st_size
        if size > max_size:
            raise ValueError(f"File too large: {size} bytes (max: {max_size})")

        return path

    def _create_error_result(self, error: Exception) -> ExtractionResult:
        """Create an error result from an exception."""
        return ExtractionResult(
            text="",
            success=False,
            error_message=f"Failed to extract text from {self.format_label}: {error}",
        )
