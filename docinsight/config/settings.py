from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    score_max: int = 100

    analysis_provider: str = "openai"
    analysis_api_key: str = ""
    analysis_model_name: str = "gpt-4o-mini"
    analysis_base_url: str = ""
    analysis_timeout_seconds: int = 60
    analysis_temperature: float = 0.3
    analysis_max_tokens: int = 4000
    analysis_fallback_to_sample: bool = True

    ocr_provider: str = "openai"
    ocr_api_key: str = ""
    ocr_model_name: str = "gpt-4o-mini"
    ocr_base_url: str = ""
    ocr_timeout_seconds: int = 60

    @field_validator("score_max")
    @classmethod
    def _check_score_max(cls, value: int) -> int:
        if value not in (10, 100):
            raise ValueError("score_max must be 10 or 100")
        return value
