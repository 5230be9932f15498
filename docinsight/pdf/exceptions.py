class PdfExtractionError(Exception):
    """Raised when a PDF text layer cannot be read."""


class PdfNoTextLayerError(PdfExtractionError):
    """Raised when a PDF opens fine but carries no extractable text (scanned pages)."""
