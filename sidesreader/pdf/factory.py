from sidesreader.config.settings import Settings
from sidesreader.pdf.base import BasePdfExtractor
from sidesreader.pdf.extractor import NativePdfExtractor
from sidesreader.pdf.pdfplumber_adapter import PdfPlumberAdapter
from sidesreader.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the configured PDF extraction engine."""

    ENGINES = ("native", "pdfplumber", "pymupdf")

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        if engine == "native":
            return NativePdfExtractor(
                flate_lookback_bytes=settings.pdf_flate_lookback_bytes,
                raw_text_fallback=settings.pdf_raw_text_fallback,
            )
        if engine == "pdfplumber":
            return PdfPlumberAdapter()
        if engine == "pymupdf":
            return PyMuPdfAdapter()
        raise ValueError(
            f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
