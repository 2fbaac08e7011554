"""Finds ``stream`` ... ``endstream`` payloads in a raw PDF buffer.

There is no object-model parser behind this: a ``stream`` keyword inside
binary data is taken at face value.
"""

from sidesreader.logging.logger import Log
from sidesreader.pdf.models import StreamSpan

STREAM_MARKER = b"stream"
ENDSTREAM_MARKER = b"endstream"
FLATE_MARKER = b"FlateDecode"

DEFAULT_FLATE_LOOKBACK = 200

_CR = 0x0D
_LF = 0x0A


def locate_streams(
    buffer: bytes, lookback: int = DEFAULT_FLATE_LOOKBACK
) -> list[StreamSpan]:
    """Return stream payload spans in left-to-right byte order.

    Args:
        buffer: Raw PDF file content.
        lookback: How many bytes before each ``stream`` keyword are searched
            for a ``FlateDecode`` filter declaration.
    """
    spans: list[StreamSpan] = []
    cursor = 0
    while cursor < len(buffer):
        stream_at = buffer.find(STREAM_MARKER, cursor)
        if stream_at == -1:
            break

        header = buffer[max(0, stream_at - lookback) : stream_at]
        is_flate = FLATE_MARKER in header

        content_start = _skip_eol(buffer, stream_at + len(STREAM_MARKER))

        endstream_at = buffer.find(ENDSTREAM_MARKER, content_start)
        if endstream_at == -1:
            Log.debug(f"No endstream after stream marker at offset {stream_at}")
            cursor = stream_at + len(STREAM_MARKER)
            continue

        content_end = _trim_eol(buffer, content_start, endstream_at)
        spans.append(StreamSpan(content_start, content_end, is_flate))
        cursor = endstream_at + len(ENDSTREAM_MARKER)
    return spans


def _skip_eol(buffer: bytes, pos: int) -> int:
    if buffer[pos : pos + 2] == b"\r\n":
        return pos + 2
    if pos < len(buffer) and buffer[pos] in (_CR, _LF):
        return pos + 1
    return pos


def _trim_eol(buffer: bytes, start: int, end: int) -> int:
    # at most one LF or CR, then at most one more CR
    if end > start and buffer[end - 1] in (_CR, _LF):
        end -= 1
    if end > start and buffer[end - 1] == _CR:
        end -= 1
    return end
