"""Offline OCR adapter.

Returns a fixed placeholder so uploads of scanned files can be exercised
without a vision provider configured.
"""

from typing import ClassVar

from docinsight.ocr.base import BaseOcrClient


class ExampleOcrAdapter(BaseOcrClient):
    """OCR adapter that never calls a provider."""

    PLACEHOLDER: ClassVar[str] = "Image content extracted (OCR provider not configured)"

    def extract_text(self, *, data_base64: str, mime_type: str, file_name: str) -> str:
        _ = data_base64, mime_type, file_name
        return self.PLACEHOLDER
