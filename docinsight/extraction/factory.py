from docinsight.config.settings import Settings
from docinsight.extraction.engine import ExtractionEngine
from docinsight.ocr.factory import OcrClientFactory
from docinsight.pdf.factory import PdfExtractorFactory


class ExtractionEngineFactory:
    """Builds an ExtractionEngine with the PDF and OCR providers named in settings."""

    @classmethod
    def create(cls, settings: Settings) -> ExtractionEngine:
        return ExtractionEngine(
            pdf_extractor=PdfExtractorFactory.create(settings),
            ocr_client=OcrClientFactory.create(settings),
        )
