import base64

from docinsight.extraction.exceptions import UnsupportedTypeError
from docinsight.extraction.html import HtmlExtractor
from docinsight.extraction.models import (
    HTML,
    NO_CONTENT,
    PDF,
    SUPPORTED_MIME_TYPES,
    ExtractedDocument,
    FileBlob,
)
from docinsight.extraction.text import normalize_whitespace
from docinsight.logging.logger import Log
from docinsight.ocr.base import BaseOcrClient
from docinsight.pdf.base import BasePdfExtractor
from docinsight.pdf.exceptions import PdfExtractionError, PdfNoTextLayerError


class ExtractionEngine:
    """Converts uploaded file bytes into plain text.

    Markup and encoding defects are recovered locally and reported as
    warnings on the returned document. The PDF text-layer reader and the
    OCR/vision client are injected so callers decide which providers run.
    Only an undeclared or unsupported MIME type raises.
    """

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        ocr_client: BaseOcrClient,
        html_extractor: HtmlExtractor | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_client = ocr_client
        self._html_extractor = html_extractor or HtmlExtractor()

    def extract(self, blob: FileBlob) -> ExtractedDocument:
        """Extract text from one file.

        Raises:
            UnsupportedTypeError: if the declared MIME type is not html, pdf, jpeg or png.
            OcrError: if an image (or unreadable PDF) is routed to OCR and the provider fails.
        """
        mime_type = blob.mime_type
        if mime_type not in SUPPORTED_MIME_TYPES:
            raise UnsupportedTypeError(blob.declared_mime_type, blob.original_name)

        if mime_type == HTML:
            document = self._html_extractor.extract(blob.data)
        elif mime_type == PDF:
            document = self._extract_pdf(blob)
        else:
            document = self._ocr(blob, mime_type, strategy="image-ocr", warnings=[])

        if document.warnings:
            Log.degraded(blob.original_name, document.warnings)
        Log.info(
            f"Extracted {len(document.plain_text)} chars from '{blob.original_name}' "
            f"via {document.strategy}"
        )
        return document

    def _extract_pdf(self, blob: FileBlob) -> ExtractedDocument:
        try:
            text = self._pdf_extractor.extract(blob.data)
        except PdfNoTextLayerError as exc:
            warning = f"PDF has no text layer, routed to OCR ({exc})"
        except PdfExtractionError as exc:
            warning = f"PDF text extraction failed, routed to OCR ({exc})"
        else:
            return ExtractedDocument(plain_text=normalize_whitespace(text), strategy="pdf-text")
        return self._ocr(blob, PDF, strategy="pdf-ocr", warnings=[warning])

    def _ocr(
        self,
        blob: FileBlob,
        mime_type: str,
        *,
        strategy: str,
        warnings: list[str],
    ) -> ExtractedDocument:
        encoded = base64.b64encode(blob.data).decode("ascii")
        text = self._ocr_client.extract_text(
            data_base64=encoded,
            mime_type=mime_type,
            file_name=blob.original_name,
        )
        if not text.strip():
            warnings.append("OCR returned no text")
            text = NO_CONTENT
        return ExtractedDocument(plain_text=text, strategy=strategy, warnings=warnings)
