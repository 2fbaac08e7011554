USER_MESSAGE = (
    "Could not extract text from this PDF. "
    "Try a text-based PDF (not scanned/image-based)."
)


class ExtractionError(Exception):
    """Base exception for all extraction failures.

    ``str(exc)`` is always the user-facing message; the technical detail
    lives in ``reason``.
    """

    def __init__(self, reason: str = "") -> None:
        super().__init__(USER_MESSAGE)
        self.reason = reason


class PdfReadError(ExtractionError):
    """Raised when the file bytes cannot be read."""


class UnsupportedSourceError(PdfReadError):
    """Raised when no byte source is available for a file reference."""
