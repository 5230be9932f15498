from typing import ClassVar

from docinsight.config.settings import Settings
from docinsight.logging.logger import Log
from docinsight.pdf.base import BasePdfExtractor
from docinsight.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docinsight.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Picks the PDF text-layer reader named by ``settings.pdf_engine``."""

    ADAPTERS: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        adapter.name: adapter for adapter in (PdfPlumberAdapter, PyMuPdfAdapter)
    }
    # PyMuPDF is still widely known by its old import name.
    ALIASES: ClassVar[dict[str, str]] = {"fitz": PyMuPdfAdapter.name}

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        engine = cls.ALIASES.get(engine, engine)
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{settings.pdf_engine}'. "
                f"Choose from: {sorted([*cls.ADAPTERS, *cls.ALIASES])}"
            )
        Log.debug(f"PDF text layer read with {adapter_cls.name}")
        return adapter_cls()
