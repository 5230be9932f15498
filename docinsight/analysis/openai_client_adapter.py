from typing import Any, ClassVar

import httpx
import openai

from docinsight.analysis.client_base import BaseAnalysisClient
from docinsight.analysis.exceptions import AnalysisError, AnalysisNetworkError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client for OpenAI and OpenAI-compatible hosts (OpenRouter, Groq, Ollama...)."""

    SCHEMA_NAME: ClassVar[str] = "report_analysis"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_tokens: int = 4000,
        provider: str = "openai",
    ) -> None:
        self.provider = provider
        self._max_tokens = max_tokens
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        request = self._build_request(model, temperature, system_prompt, user_prompt, json_schema)
        try:
            response = self._client.chat.completions.create(**request)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        reply = response.choices[0].message.content
        if reply is None:
            raise AnalysisError("AI returned empty response")
        return reply

    def _build_request(
        self,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> dict[str, Any]:
        return {
            "model": model,
            "temperature": temperature,
            "max_tokens": self._max_tokens,
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": self.SCHEMA_NAME,
                    "strict": False,
                    "schema": json_schema,
                },
            },
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
