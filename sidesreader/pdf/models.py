from dataclasses import dataclass, field
from typing import Literal

OperationType = Literal["td", "tm", "tj"]


@dataclass(frozen=True)
class StreamSpan:
    """Half-open byte range of one stream payload inside a PDF buffer."""

    start: int
    end: int
    is_flate: bool

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class TextOperation:
    """A text operator recognised in a content stream."""

    type: OperationType
    index: int  # offset of the operator keyword in the content string
    text: str = ""
    y_move: float | None = None


@dataclass(frozen=True)
class SpanOutcome:
    """Result of decoding a single stream span.

    ``text`` holds the Latin-1 content string when the span decoded,
    otherwise ``skipped_reason`` says why it was dropped.
    """

    span: StreamSpan
    text: str = ""
    skipped_reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.skipped_reason is None


@dataclass
class ExtractionReport:
    """Accumulates diagnostics for one extraction call."""

    text: str = ""
    spans_found: int = 0
    spans_decoded: int = 0
    used_fallback: bool = False
    warnings: list[str] = field(default_factory=list)

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())
