"""
Plain text document extractor.
"""

from resume_ats.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


class TextExtractor(BaseExtractor):
    """Extractor for plain text documents."""

    format_label = "TXT"

    ENCODINGS = ("utf-8", "utf-16", "latin-1")

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt",)

    def extract_from_bytes(self, content: bytes, filename: str = "document.txt") -> ExtractionResult:
        """Decode bytes with the first encoding that works."""
        for encoding in self.ENCODINGS:
            try:
                text = content.decode(encoding)
            except UnicodeDecodeError:
                continue
            return ExtractionResult(
                text=text.replace("\r\n", "\n").strip(),
                metadata={"extractor": "plain_text", "encoding": encoding},
            )

        # latin-1 decodes any byte string, so this is only reached if ENCODINGS changes
        logger.warning(f"No encoding matched for {filename}")
        return ExtractionResult(text="", success=False, error_message="Could not decode text file")
