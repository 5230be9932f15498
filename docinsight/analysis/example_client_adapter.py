"""Offline analysis client.

Answers every prompt with the sample analysis. Used for local development,
demos without an API key, and as a template for new provider adapters:
implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json

from docinsight.analysis.client_base import BaseAnalysisClient
from docinsight.analysis.sample import sample_analysis


class ExampleClientAdapter(BaseAnalysisClient):
    """Returns the sample analysis as JSON without any network calls."""

    provider = "example"

    def __init__(self, score_max: int = 100) -> None:
        self._score_max = score_max

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(sample_analysis(score_max=self._score_max))
