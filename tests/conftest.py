import io
import zlib
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

PdfBuilder = Callable[..., bytes]


def _build_pdf(*contents: bytes, flate: bool = False) -> bytes:
    """Assemble a bare PDF with one stream object per content string.

    No xref table: the native engine never reads one.
    """
    out = io.BytesIO()
    out.write(b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n")
    for number, content in enumerate(contents, start=2):
        payload = zlib.compress(content) if flate else content
        filters = b" /Filter /FlateDecode" if flate else b""
        out.write(b"%d 0 obj\n<< /Length %d%s >>\n" % (number, len(payload), filters))
        out.write(b"stream\r\n" + payload + b"\r\nendstream\nendobj\n")
    out.write(b"trailer\n<< /Root 1 0 R >>\n%%EOF\n")
    return out.getvalue()


@pytest.fixture()
def make_pdf() -> PdfBuilder:
    """Builder for hand-made PDFs: ``make_pdf(b"BT (Hi) Tj ET", flate=True)``."""
    return _build_pdf


@pytest.fixture()
def hello_pdf_bytes() -> bytes:
    return _build_pdf(b"BT\n/F1 12 Tf\n72 712 Td\n(Hello World) Tj\nET")


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()
