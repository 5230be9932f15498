import argparse
import json
import mimetypes
import sys
from pathlib import Path

from docinsight.analysis.exceptions import AnalysisError
from docinsight.config.settings import Settings
from docinsight.extraction.models import FileBlob
from docinsight.logging.logger import Log
from docinsight.processor.exceptions import ProcessorError
from docinsight.processor.processor import build_processor


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docinsight-analyze",
        description="Extract text from business documents and print an AI analysis.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="HTML, PDF, JPEG or PNG files")
    parser.add_argument("--title", default=None, help="report title placed at the top of the corpus")
    parser.add_argument(
        "--markdown",
        action="store_true",
        help="print the executive summary instead of the JSON analysis",
    )
    return parser.parse_args(argv)


def load_blob(path: Path) -> FileBlob:
    """Read a file and guess its MIME type from the name."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return FileBlob(
        data=path.read_bytes(),
        declared_mime_type=mime_type or "application/octet-stream",
        original_name=path.name,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> processor -> analysis of the given files."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    processor = build_processor(settings)
    try:
        blobs = [load_blob(path) for path in args.files]
        report = processor.process(blobs, title=args.title)
    except (OSError, ProcessorError, AnalysisError) as exc:
        Log.error(str(exc))
        return 1

    if args.markdown:
        print(report.outcome.markdown)
    else:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
