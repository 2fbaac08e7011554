import zlib

from sidesreader.pdf.locator import locate_streams
from sidesreader.pdf.models import StreamSpan


class TestLocateStreams:
    def test_finds_uncompressed_stream(self) -> None:
        buffer = b"<< /Length 5 >>\nstream\nHELLO\nendstream"
        spans = locate_streams(buffer)
        assert len(spans) == 1
        span = spans[0]
        assert buffer[span.start : span.end] == b"HELLO"
        assert span.is_flate is False

    def test_marks_flate_when_declared_in_header(self) -> None:
        payload = zlib.compress(b"BT (x) Tj ET")
        buffer = b"<< /Filter /FlateDecode >>\nstream\r\n" + payload + b"\r\nendstream"
        [span] = locate_streams(buffer)
        assert span.is_flate is True
        assert buffer[span.start : span.end] == payload

    def test_flate_marker_outside_lookback_is_ignored(self) -> None:
        buffer = b"/FlateDecode" + b" " * 300 + b"stream\nabc\nendstream"
        [span] = locate_streams(buffer)
        assert span.is_flate is False

    def test_lookback_is_configurable(self) -> None:
        buffer = b"/FlateDecode" + b" " * 300 + b"stream\nabc\nendstream"
        [span] = locate_streams(buffer, lookback=400)
        assert span.is_flate is True

    def test_skips_crlf_after_keyword(self) -> None:
        buffer = b"stream\r\nabc\r\nendstream"
        [span] = locate_streams(buffer)
        assert buffer[span.start : span.end] == b"abc"

    def test_no_eol_after_keyword(self) -> None:
        buffer = b"streamabcendstream"
        assert locate_streams(buffer) == [StreamSpan(6, 9, False)]

    def test_trims_only_one_eol_before_endstream(self) -> None:
        buffer = b"stream\nabc\n\nendstream"
        [span] = locate_streams(buffer)
        assert buffer[span.start : span.end] == b"abc\n"

    def test_empty_stream(self) -> None:
        buffer = b"stream\nendstream"
        [span] = locate_streams(buffer)
        assert span.length == 0

    def test_multiple_streams_in_byte_order(self) -> None:
        buffer = b"stream\none\nendstream\nxx\nstream\ntwo\nendstream"
        spans = locate_streams(buffer)
        assert [buffer[s.start : s.end] for s in spans] == [b"one", b"two"]


class TestMalformedStreams:
    def test_missing_endstream_returns_no_spans(self) -> None:
        assert locate_streams(b"<< >>\nstream\nBT (lost) Tj ET") == []

    def test_unterminated_stream_does_not_hide_later_ones(self) -> None:
        # the trailing marker has no endstream; earlier pairs still count
        buffer = b"stream\nfirst\nendstream\nstream\nno end here"
        spans = locate_streams(buffer)
        assert [buffer[s.start : s.end] for s in spans] == [b"first"]

    def test_empty_buffer(self) -> None:
        assert locate_streams(b"") == []

    def test_no_stream_keyword(self) -> None:
        assert locate_streams(b"%PDF-1.4\n%%EOF") == []
