"""
DOCX document text extractor.

Uses python-docx; paragraphs become lines, empty paragraphs stay as blank
lines so section breaks survive.
"""

import io

from docx import Document

from resume_ats.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


class DOCXExtractor(BaseExtractor):
    """Extractor for Microsoft Word documents (.docx)."""

    format_label = "DOCX"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx",)

    def extract_from_bytes(self, content: bytes, filename: str = "document.docx") -> ExtractionResult:
        """Extract text from DOCX bytes."""
        try:
            doc = Document(io.BytesIO(content))
        except Exception as e:
            logger.error(f"DOCX extraction failed for {filename}: {e}")
            return self._create_error_result(e)

        lines = [paragraph.text.strip() for paragraph in doc.paragraphs]
        return ExtractionResult(
            text="\n".join(lines).strip(),
            metadata={"extractor": "python-docx", "filename": filename},
        )
