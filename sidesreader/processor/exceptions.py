class ProcessorError(Exception):
    """Base exception for script loading errors."""


class NoTextFoundError(ProcessorError):
    """Raised when a PDF was read but holds no recoverable text."""
