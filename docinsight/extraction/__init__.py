from docinsight.extraction.engine import ExtractionEngine
from docinsight.extraction.exceptions import ExtractionError, UnsupportedTypeError
from docinsight.extraction.factory import ExtractionEngineFactory
from docinsight.extraction.html import sanitize_html
from docinsight.extraction.models import NO_CONTENT, ExtractedDocument, FileBlob

__all__ = [
    "NO_CONTENT",
    "ExtractedDocument",
    "ExtractionEngine",
    "ExtractionEngineFactory",
    "ExtractionError",
    "FileBlob",
    "UnsupportedTypeError",
    "sanitize_html",
]
