from typing import ClassVar

from docinsight.analysis.analyzer import Analyzer
from docinsight.analysis.base import BaseAnalyzer
from docinsight.analysis.example_client_adapter import ExampleClientAdapter
from docinsight.analysis.normalizer import ResponseNormalizer
from docinsight.analysis.openai_client_adapter import OpenAIClientAdapter
from docinsight.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create an analyzer from application settings."""
        provider = settings.analysis_provider.strip().lower()
        normalizer = ResponseNormalizer(score_max=settings.score_max)
        if provider == "example":
            return Analyzer(
                client=ExampleClientAdapter(score_max=settings.score_max),
                model="example",
                normalizer=normalizer,
            )
        client = OpenAIClientAdapter(
            api_key=settings.analysis_api_key,
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            max_tokens=settings.analysis_max_tokens,
            provider=provider,
        )
        return Analyzer(
            client=client,
            model=settings.analysis_model_name,
            normalizer=normalizer,
            temperature=settings.analysis_temperature,
            fallback_to_sample=settings.analysis_fallback_to_sample,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.analysis_base_url.strip() or None
        if provider == "openai_compatible":
            url = settings.analysis_base_url.strip()
            if not url:
                raise ValueError(
                    "analysis_base_url is required for analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.analysis_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown analysis provider '{provider}'. Choose from: {supported}")
