from abc import ABC, abstractmethod

from docinsight.pdf.exceptions import PdfNoTextLayerError


class BasePdfExtractor(ABC):
    """Contract for PDF text-layer extraction adapters."""

    name: str = ""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts joined by newlines, stripped.

        Raises:
            PdfNoTextLayerError: if the document has no text layer.
            PdfExtractionError: if the document is encrypted or corrupt.
        """

    def _join_pages(self, pages: list[str]) -> str:
        text = "\n".join(page for page in pages if page).strip()
        if not text:
            raise PdfNoTextLayerError(f"{self.name}: PDF has no extractable text layer")
        return text
