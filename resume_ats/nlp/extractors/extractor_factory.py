"""
Factory for creating appropriate document extractors.
"""

import asyncio
from pathlib import Path
from typing import Optional

from resume_ats.utils.constants import SUPPORTED_RESUME_FORMATS
from resume_ats.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult, TextExtractionError, UnsupportedFileTypeError
from .docx_extractor import DOCXExtractor
from .pdf_extractor import PDFExtractor
from .text_extractor import TextExtractor

logger = get_logger(__name__)

UNSUPPORTED_MESSAGE = "Unsupported file type. Please upload a PDF, DOCX, or TXT file."


class ExtractorFactory:
    """
    Factory class for creating document extractors.

    Automatically selects the appropriate extractor based on file extension.
    """

    _extractors: list[BaseExtractor] = []
    _initialized: bool = False

    @classmethod
    def _initialize(cls) -> None:
        """Initialize available extractors."""
        if cls._initialized:
            return

        cls._extractors = [
            PDFExtractor(),
            DOCXExtractor(),
            TextExtractor(),
        ]
        cls._initialized = True

    @classmethod
    def get_extractor(cls, file_path: str | Path) -> Optional[BaseExtractor]:
        """Get the extractor for a file, or None if the format is unsupported."""
        cls._initialize()

        extension = Path(file_path).suffix.lower()
        for extractor in cls._extractors:
            if extension in extractor.supported_extensions:
                return extractor

        logger.warning(f"No extractor found for extension: {extension}")
        return None

    @classmethod
    def extract(cls, file_path: str | Path) -> ExtractionResult:
        """Extract text from a file using the appropriate extractor."""
        extractor = cls.get_extractor(file_path)
        if extractor is None:
            return ExtractionResult(text="", success=False, error_message=UNSUPPORTED_MESSAGE)
        return extractor.extract(file_path)

    @classmethod
    def extract_from_bytes(cls, content: bytes, filename: str) -> ExtractionResult:
        """Extract text from file bytes using the appropriate extractor."""
        extractor = cls.get_extractor(filename)
        if extractor is None:
            return ExtractionResult(text="", success=False, error_message=UNSUPPORTED_MESSAGE)
        return extractor.extract_from_bytes(content, filename)

    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        """Get list of all supported file extensions."""
        cls._initialize()
        return [ext for extractor in cls._extractors for ext in extractor.supported_extensions]

    @classmethod
    def is_supported(cls, file_path: str | Path) -> bool:
        """Check if a file format is supported."""
        return Path(file_path).suffix.lower() in SUPPORTED_RESUME_FORMATS


def extract_text(file_path: str | Path) -> str:
    """
    Return the plain text of a resume file.

    Raises:
        UnsupportedFileTypeError: extension is not PDF, DOCX or TXT
        TextExtractionError: the file could not be read or decoded
    """
    if not ExtractorFactory.is_supported(file_path):
        raise UnsupportedFileTypeError(UNSUPPORTED_MESSAGE)

    result = ExtractorFactory.extract(file_path)
    if not result.success:
        raise TextExtractionError(result.error_message)
    for warning in result.warnings:
        logger.warning(f"{Path(file_path).name}: {warning}")
    return result.text


async def extract_text_from_file(file_path: str | Path) -> str:
    """Single-shot async wrapper around ``extract_text``; runs in a worker thread."""
    return await asyncio.to_thread(extract_text, file_path)


# Convenience function
def get_extractor(file_path: str | Path) -> Optional[BaseExtractor]:
    """Get the appropriate extractor for a file."""
    return ExtractorFactory.get_extractor(file_path)
