import re

from sidesreader.config.settings import Settings
from sidesreader.logging.logger import Log
from sidesreader.pdf.api import is_pdf_file
from sidesreader.pdf.base import BasePdfExtractor
from sidesreader.pdf.cleanup import clean_text
from sidesreader.pdf.factory import PdfExtractorFactory
from sidesreader.processor.exceptions import NoTextFoundError
from sidesreader.processor.models import LoadedScript
from sidesreader.source.resolver import BinarySource, ByteSourceResolver

DEFAULT_TITLE = "Untitled"

_PDF_SUFFIX_RE = re.compile(r"\.pdf$", re.IGNORECASE)
_ANY_SUFFIX_RE = re.compile(r"\.[^.]+$")


def title_from_filename(file_name: str, is_pdf: bool = True) -> str:
    """Derive a script title from a file name.

    PDFs lose a trailing ``.pdf`` (``Hamlet.PDF`` -> ``Hamlet``); other files
    lose whatever final extension they have (``notes.txt`` -> ``notes``).
    """
    suffix_re = _PDF_SUFFIX_RE if is_pdf else _ANY_SUFFIX_RE
    title = suffix_re.sub("", file_name.strip())
    return title.strip() or DEFAULT_TITLE


class ScriptLoader:
    """Loads a picked file as script text.

    PDFs go through the configured extraction engine; any other file is read
    as UTF-8 text.
    """

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        resolver: ByteSourceResolver | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._resolver = resolver if resolver is not None else ByteSourceResolver()

    def load(
        self,
        uri: str,
        file_name: str,
        mime_type: str | None = None,
        binary_source: BinarySource | None = None,
    ) -> LoadedScript:
        """Read and convert a file to text.

        Raises:
            PdfReadError: if the file bytes cannot be obtained.
            ExtractionError: if PDF extraction fails.
            NoTextFoundError: if a PDF yields only whitespace.
        """
        raw_bytes = self._resolver.resolve(uri, binary_source)
        Log.info(f"Loaded {len(raw_bytes)} bytes for {file_name}")

        if not is_pdf_file(file_name, mime_type):
            text = clean_text(raw_bytes.decode("utf-8", errors="replace"))
            return LoadedScript(
                title=title_from_filename(file_name, is_pdf=False),
                text=text,
                is_pdf=False,
            )

        report = self._pdf_extractor.extract_report(raw_bytes)
        if not report.has_text:
            raise NoTextFoundError(
                "Could not extract text from this PDF. It may be scanned or "
                "image-based. Try a text-based PDF or paste the text manually."
            )
        Log.info(f"Extracted {len(report.text)} chars from {file_name}")
        return LoadedScript(
            title=title_from_filename(file_name),
            text=report.text,
            is_pdf=True,
            report=report,
        )


def build_script_loader(settings: Settings) -> ScriptLoader:
    """Build a ScriptLoader with the configured PDF engine."""
    return ScriptLoader(pdf_extractor=PdfExtractorFactory.create(settings))
