import zlib
from unittest.mock import patch

import pytest

from sidesreader.pdf.exceptions import ExtractionError
from sidesreader.pdf.extractor import NativePdfExtractor

_CONTENT = b"BT\n/F1 12 Tf\n72 712 Td\n(Hello World) Tj\nET"


class TestNativeExtraction:
    def test_uncompressed_stream(self, hello_pdf_bytes: bytes) -> None:
        assert NativePdfExtractor().extract(hello_pdf_bytes) == "Hello World"

    def test_flate_stream_gives_same_text(self, make_pdf) -> None:  # type: ignore[no-untyped-def]
        pdf_bytes = make_pdf(_CONTENT, flate=True)
        assert NativePdfExtractor().extract(pdf_bytes) == "Hello World"

    def test_streams_are_joined_in_byte_order(self, make_pdf) -> None:  # type: ignore[no-untyped-def]
        pdf_bytes = make_pdf(b"BT (Page one) Tj ET", b"BT (Page two) Tj ET")
        assert NativePdfExtractor().extract(pdf_bytes) == "Page one\nPage two"

    def test_line_breaks_follow_vertical_moves(self, make_pdf) -> None:  # type: ignore[no-untyped-def]
        content = b"BT (JULIET:) Tj 0 -14 Td (O Romeo, ) Tj 60 0 Td (Romeo!) Tj ET"
        pdf_bytes = make_pdf(content, flate=True)
        assert NativePdfExtractor().extract(pdf_bytes) == "JULIET:\nO Romeo, Romeo!"

    def test_result_is_cleaned(self, make_pdf) -> None:  # type: ignore[no-untyped-def]
        pdf_bytes = make_pdf(b"BT (  lots   of\tspace ) Tj ET")
        assert NativePdfExtractor().extract(pdf_bytes) == "lots of space"

    def test_no_text_returns_empty_string(self, make_pdf) -> None:  # type: ignore[no-untyped-def]
        pdf_bytes = make_pdf(b"0 0 m 100 100 l S")
        assert NativePdfExtractor().extract(pdf_bytes) == ""


class TestPartialFailures:
    def test_corrupt_flate_stream_is_skipped(self) -> None:
        good = zlib.compress(b"BT (Survivor) Tj ET")
        pdf_bytes = (
            b"1 0 obj\n<< /Filter /FlateDecode >>\nstream\nnot deflate data\nendstream\nendobj\n"
            b"2 0 obj\n<< /Filter /FlateDecode >>\nstream\n" + good + b"\r\nendstream\nendobj\n"
        )
        report = NativePdfExtractor().extract_report(pdf_bytes)
        assert report.text == "Survivor"
        assert report.spans_found == 2
        assert report.spans_decoded == 1
        assert len(report.warnings) == 1
        assert "inflate failed" in report.warnings[0]

    def test_stream_without_endstream_does_not_raise(self) -> None:
        pdf_bytes = b"%PDF-1.4\n1 0 obj\n<< /Length 99 >>\nstream\ntruncated"
        report = NativePdfExtractor().extract_report(pdf_bytes)
        assert report.text == ""
        assert report.spans_found == 0

    def test_unmatched_stream_keeps_earlier_valid_span(self, make_pdf) -> None:  # type: ignore[no-untyped-def]
        pdf_bytes = make_pdf(b"BT (Kept) Tj ET") + b"9 0 obj\n<< >>\nstream\n(Lost) Tj"
        assert NativePdfExtractor().extract(pdf_bytes) == "Kept"

    def test_unexpected_error_is_wrapped(self, hello_pdf_bytes: bytes) -> None:
        with patch(
            "sidesreader.pdf.extractor.interpret_content",
            side_effect=RuntimeError("boom"),
        ):
            with pytest.raises(ExtractionError) as exc_info:
                NativePdfExtractor().extract(hello_pdf_bytes)
        assert "boom" in exc_info.value.reason


class TestFallback:
    _BARE = b"%PDF-1.4\nBT /F1 12 Tf 72 712 Td (Fallback text) Tj ET\n%%EOF"

    def test_fallback_used_when_streams_yield_nothing(self) -> None:
        report = NativePdfExtractor().extract_report(self._BARE)
        assert report.used_fallback is True
        assert report.text == "Fallback text"
        assert report.has_text

    def test_fallback_not_used_when_streams_have_text(self, hello_pdf_bytes: bytes) -> None:
        report = NativePdfExtractor().extract_report(hello_pdf_bytes)
        assert report.used_fallback is False

    def test_fallback_can_be_disabled(self) -> None:
        extractor = NativePdfExtractor(raw_text_fallback=False)
        assert extractor.extract(self._BARE) == ""
