from sidesreader.pdf.api import extract_text_from_pdf, is_pdf_file
from sidesreader.pdf.exceptions import ExtractionError

__all__ = ["ExtractionError", "extract_text_from_pdf", "is_pdf_file"]
