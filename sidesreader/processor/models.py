from dataclasses import dataclass

from sidesreader.pdf.models import ExtractionReport


@dataclass(frozen=True)
class LoadedScript:
    """Text of a picked file, ready for the library or teleprompter."""

    title: str
    text: str
    is_pdf: bool
    report: ExtractionReport | None = None  # set for PDFs only

    @property
    def warnings(self) -> list[str]:
        return self.report.warnings if self.report is not None else []
