"""
PDF document text extractor.

Uses pdfplumber first and falls back to pypdf when it yields little text.
"""

import io

import pdfplumber
from pypdf import PdfReader

from resume_ats.utils.config import get_settings
from resume_ats.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


class PDFExtractor(BaseExtractor):
    """Extractor for PDF documents."""

    format_label = "PDF"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".pdf",)

    def extract_from_bytes(self, content: bytes, filename: str = "document.pdf") -> ExtractionResult:
        """Extract text from PDF bytes, one line per page boundary."""
        try:
            pages = self._pages_with_pdfplumber(content)
            text = "\n".join(pages).strip()
            warnings = []
            extractor = "pdfplumber"

            if len(text) < get_settings().extraction.min_pdfplumber_chars:
                warnings.append("pdfplumber extraction yielded limited text, trying pypdf")
                pages = self._pages_with_pypdf(content)
                text = "\n".join(pages).strip()
                extractor = "pypdf"

            if not text:
                warnings.append("PDF may be image-based or encrypted")

            return ExtractionResult(
                text=text,
                page_count=len(pages),
                metadata={"extractor": extractor, "filename": filename},
                warnings=warnings,
            )
        except Exception as e:
            logger.error(f"PDF extraction failed for {filename}: {e}")
            return self._create_error_result(e)

    @staticmethod
    def _pages_with_pdfplumber(content: bytes) -> list[str]:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]

    @staticmethod
    def _pages_with_pypdf(content: bytes) -> list[str]:
        reader = PdfReader(io.BytesIO(content))
        return [page.extract_text() or "" for page in reader.pages]
