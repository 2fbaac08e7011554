import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from sidesreader.config.settings import Settings
from sidesreader.logging.logger import Log
from sidesreader.pdf.exceptions import ExtractionError
from sidesreader.pdf.factory import PdfExtractorFactory
from sidesreader.processor.exceptions import NoTextFoundError
from sidesreader.processor.script_loader import build_script_loader


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sidesreader",
        description="Extract plain text from text-based PDF sides and scripts.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="PDF or text files")
    parser.add_argument(
        "--engine",
        choices=PdfExtractorFactory.ENGINES,
        help="extraction engine (default: PDF_ENGINE setting)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="print extraction diagnostics after the text",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> build loader -> print each file's text."""
    args = _parse_args(argv)
    settings = Settings()
    if args.engine:
        settings = settings.model_copy(update={"pdf_engine": args.engine})
    Log.configure(settings.log_level)

    loader = build_script_loader(settings)
    exit_code = 0

    for path in args.files:
        if len(args.files) > 1:
            print(f"==> {path} <==")
        try:
            script = loader.load(str(path), path.name)
        except (ExtractionError, NoTextFoundError) as exc:
            reason = getattr(exc, "reason", "")
            Log.error(f"{path}: {exc}" + (f" ({reason})" if reason else ""))
            exit_code = 1
            continue

        print(script.text)
        report = script.report
        if args.report and report is not None:
            print(
                f"-- streams found: {report.spans_found}, decoded: "
                f"{report.spans_decoded}, fallback: {report.used_fallback}"
            )
            for warning in report.warnings:
                print(f"-- warning: {warning}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
