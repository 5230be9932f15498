from docinsight.ocr.base import BaseOcrClient
from docinsight.ocr.factory import OcrClientFactory

__all__ = ["BaseOcrClient", "OcrClientFactory"]
