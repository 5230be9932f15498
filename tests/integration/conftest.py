import pytest

from docinsight.config.settings import Settings
from docinsight.processor.processor import ReportProcessor, build_processor

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def offline_settings() -> Settings:
    """Settings that run the whole pipeline without network providers."""
    return Settings(analysis_provider="example", ocr_provider="example", pdf_engine="pdfplumber")


@pytest.fixture
def offline_processor(offline_settings: Settings) -> ReportProcessor:
    return build_processor(offline_settings)


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_SIGNATURE + b"\x00" * 32
