from abc import ABC, abstractmethod

from sidesreader.pdf.models import ExtractionReport


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction engines."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Cleaned, newline-delimited text. An empty string means the
            document holds no recoverable text; that is not an error.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """

    def extract_report(self, pdf_bytes: bytes) -> ExtractionReport:
        """Extract text with diagnostics.

        Engines without stream-level diagnostics report only the text.
        """
        return ExtractionReport(text=self.extract(pdf_bytes))
