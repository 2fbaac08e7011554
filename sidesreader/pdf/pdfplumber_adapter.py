import io

import pdfplumber

from sidesreader.pdf.base import BasePdfExtractor
from sidesreader.pdf.cleanup import clean_text
from sidesreader.pdf.exceptions import ExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text with pdfplumber, for documents with font-encoded text."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return clean_text("\n".join(pages))
