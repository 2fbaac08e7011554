from sidesreader.config.settings import Settings
from sidesreader.logging.logger import Log
from sidesreader.pdf.exceptions import ExtractionError
from sidesreader.pdf.factory import PdfExtractorFactory
from sidesreader.source.resolver import BinarySource, ByteSourceResolver

PDF_MIME_TYPE = "application/pdf"


def is_pdf_file(file_name: str, mime_type: str | None = None) -> bool:
    """Classify a picked file as PDF by MIME type or ``.pdf`` extension."""
    if mime_type == PDF_MIME_TYPE:
        return True
    return file_name.lower().endswith(".pdf")


def extract_text_from_pdf(
    uri: str,
    binary_source: BinarySource | None = None,
    settings: Settings | None = None,
) -> str:
    """Read a PDF and return its text.

    Args:
        uri: Path, ``file://`` URI or ``data:`` URI of the document.
        binary_source: Already-loaded file content; used instead of ``uri``.
        settings: Engine configuration; environment defaults when omitted.

    Returns:
        The extracted text, or an empty string if the PDF holds no
        recoverable text.

    Raises:
        PdfReadError: if the file bytes cannot be obtained.
        ExtractionError: if the engine fails on the bytes.
    """
    settings = settings if settings is not None else Settings()
    try:
        pdf_bytes = ByteSourceResolver().resolve(uri, binary_source)
        Log.debug(f"Read {len(pdf_bytes)} bytes from {uri or 'in-memory file'}")
        return PdfExtractorFactory.create(settings).extract(pdf_bytes)
    except ExtractionError as exc:
        Log.error(f"PDF extraction failed: {exc.reason}")
        raise
    except Exception as exc:
        Log.error(f"PDF extraction failed: {exc}")
        raise ExtractionError(f"unexpected failure: {exc}") from exc
