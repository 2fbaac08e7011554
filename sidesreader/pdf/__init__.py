from sidesreader.pdf.api import extract_text_from_pdf, is_pdf_file
from sidesreader.pdf.exceptions import ExtractionError, PdfReadError, UnsupportedSourceError

__all__ = [
    "ExtractionError",
    "PdfReadError",
    "UnsupportedSourceError",
    "extract_text_from_pdf",
    "is_pdf_file",
]
