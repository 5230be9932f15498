from abc import ABC, abstractmethod


class BaseOcrClient(ABC):
    """Contract for OCR/vision providers that turn a scanned file into text."""

    @abstractmethod
    def extract_text(self, *, data_base64: str, mime_type: str, file_name: str) -> str:
        """Return the text visible in the file.

        Args:
            data_base64: File content, base64-encoded.
            mime_type: Normalized MIME type (image/jpeg, image/png or application/pdf).
            file_name: Original upload name, passed through for providers that want it.

        Raises:
            OcrError: on any provider failure.
        """
