class OcrError(Exception):
    """Raised when the OCR/vision provider cannot return text for a file."""
