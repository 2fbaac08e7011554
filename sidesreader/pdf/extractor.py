from sidesreader.logging.logger import Log
from sidesreader.pdf.base import BasePdfExtractor
from sidesreader.pdf.cleanup import clean_text
from sidesreader.pdf.decoder import decode_span
from sidesreader.pdf.exceptions import ExtractionError
from sidesreader.pdf.fallback import extract_raw_text
from sidesreader.pdf.interpreter import interpret_content
from sidesreader.pdf.locator import DEFAULT_FLATE_LOOKBACK, locate_streams
from sidesreader.pdf.models import ExtractionReport


class NativePdfExtractor(BasePdfExtractor):
    """Extracts text by scanning raw content streams for text operators.

    Pipeline: locate streams -> inflate/decode -> interpret -> clean, with a
    whole-buffer ``BT``/``ET`` scan when the streams yield nothing.
    """

    def __init__(
        self,
        flate_lookback_bytes: int = DEFAULT_FLATE_LOOKBACK,
        raw_text_fallback: bool = True,
    ) -> None:
        self._lookback = flate_lookback_bytes
        self._raw_text_fallback = raw_text_fallback

    def extract(self, pdf_bytes: bytes) -> str:
        return self.extract_report(pdf_bytes).text

    def extract_report(self, pdf_bytes: bytes) -> ExtractionReport:
        """Extract text and collect per-stream diagnostics."""
        try:
            return self._run(pdf_bytes)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"native extraction failed: {exc}") from exc

    def _run(self, pdf_bytes: bytes) -> ExtractionReport:
        report = ExtractionReport()
        spans = locate_streams(pdf_bytes, lookback=self._lookback)
        report.spans_found = len(spans)
        Log.debug(f"Located {len(spans)} streams in {len(pdf_bytes)} bytes")

        text_parts: list[str] = []
        for span in spans:
            outcome = decode_span(pdf_bytes, span)
            if not outcome.ok:
                report.warnings.append(outcome.skipped_reason or "")
                continue
            report.spans_decoded += 1
            extracted = interpret_content(outcome.text)
            if extracted.strip():
                text_parts.append(extracted)

        report.text = clean_text("\n".join(text_parts))
        if not report.text and self._raw_text_fallback:
            Log.info("No text in content streams, scanning raw buffer for text objects")
            report.used_fallback = True
            report.text = extract_raw_text(pdf_bytes)
        return report
