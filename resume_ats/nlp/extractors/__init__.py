"""
Document text extractors for PDF, DOCX and plain text files.
"""

from .base import BaseExtractor, ExtractionResult, TextExtractionError, UnsupportedFileTypeError
from .docx_extractor import DOCXExtractor
from .extractor_factory import (
    ExtractorFactory,
    extract_text,
    extract_text_from_file,
    get_extractor,
)
from .pdf_extractor import PDFExtractor
from .text_extractor import TextExtractor

__all__ = [
    "BaseExtractor",
    "ExtractionResult",
    "TextExtractionError",
    "UnsupportedFileTypeError",
    "DOCXExtractor",
    "ExtractorFactory",
    "extract_text",
    "extract_text_from_file",
    "get_extractor",
    "PDFExtractor",
    "TextExtractor",
]
