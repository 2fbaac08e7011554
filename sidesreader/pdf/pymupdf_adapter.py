import pymupdf

from sidesreader.pdf.base import BasePdfExtractor
from sidesreader.pdf.cleanup import clean_text
from sidesreader.pdf.exceptions import ExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text with PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return clean_text("\n".join(pages))
