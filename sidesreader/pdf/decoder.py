import zlib

from sidesreader.logging.logger import Log
from sidesreader.pdf.models import SpanOutcome, StreamSpan


def decode_span(buffer: bytes, span: StreamSpan) -> SpanOutcome:
    """Inflate (when Flate-compressed) and Latin-1 decode one stream span.

    A stream that fails to inflate is reported as skipped instead of raising,
    so one corrupt stream never aborts the rest of the document.
    """
    payload = buffer[span.start : span.end]
    if span.is_flate:
        try:
            payload = zlib.decompress(payload)
        except zlib.error as exc:
            reason = f"inflate failed for stream at {span.start}-{span.end}: {exc}"
            Log.warning(f"Skipping stream: {reason}")
            return SpanOutcome(span=span, skipped_reason=reason)
    return SpanOutcome(span=span, text=payload.decode("latin-1"))
