from docinsight.config.settings import Settings
from docinsight.ocr.base import BaseOcrClient
from docinsight.ocr.example_client_adapter import ExampleOcrAdapter
from docinsight.ocr.openai_vision_adapter import OpenAIVisionAdapter


class OcrClientFactory:
    """Creates the configured OCR/vision client."""

    PROVIDERS = ("example", "openai")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrClient:
        provider = settings.ocr_provider.strip().lower()
        if provider == "example":
            return ExampleOcrAdapter()
        if provider == "openai":
            return OpenAIVisionAdapter(
                api_key=settings.ocr_api_key or settings.analysis_api_key,
                model=settings.ocr_model_name,
                timeout_seconds=settings.ocr_timeout_seconds,
                base_url=settings.ocr_base_url.strip() or None,
            )
        raise ValueError(f"Unknown OCR provider '{provider}'. Choose from: {list(cls.PROVIDERS)}")
