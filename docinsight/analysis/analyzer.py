"""LLM-backed report analyzer."""

import json
from pathlib import Path

from docinsight.analysis.base import BaseAnalyzer
from docinsight.analysis.client_base import BaseAnalysisClient
from docinsight.analysis.exceptions import AnalysisNetworkError, MalformedAIResponseError
from docinsight.analysis.markdown import render_markdown_summary
from docinsight.analysis.models import AnalysisOutcome, AnalysisResult
from docinsight.analysis.normalizer import ResponseNormalizer
from docinsight.analysis.prompt_loader import load_prompt_template, load_system_prompt
from docinsight.analysis.sample import sample_analysis
from docinsight.extraction.corpus import report_title_from_corpus
from docinsight.logging.logger import Log

MAX_TEMPERATURE = 0.3


class Analyzer(BaseAnalyzer):
    """Sends a corpus to an AI provider and normalizes the reply."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        normalizer: ResponseNormalizer | None = None,
        temperature: float = 0.0,
        fallback_to_sample: bool = False,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._normalizer = normalizer or ResponseNormalizer()
        self._temperature = max(0.0, min(MAX_TEMPERATURE, temperature))
        self._fallback_to_sample = fallback_to_sample
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._json_schema = self._normalizer.json_schema

    def analyze(self, corpus: str) -> AnalysisOutcome:
        prompt = self._build_prompt(corpus)
        Log.debug(f"Analysis prompt:\n{prompt}")
        try:
            raw_response = self._call_ai(prompt)
            Log.debug(f"AI raw response:\n{raw_response}")
            result = self._normalizer.normalize(raw_response)
        except (MalformedAIResponseError, AnalysisNetworkError) as exc:
            if not self._fallback_to_sample:
                raise
            Log.warning(f"Analysis failed, using sample analysis: {exc}")
            return self._sample_outcome(corpus)

        Log.info(
            f"Analysis via {self._client.provider} complete: score {result.score}, "
            f"{len(result.kpis)} KPIs, {len(result.insights)} insights"
        )
        return AnalysisOutcome(result=result, markdown=self._render(result))

    def _build_prompt(self, corpus: str) -> str:
        return self._prompt_template.format(
            corpus=corpus,
            json_schema=json.dumps(self._json_schema, indent=2),
            score_max=self._normalizer.score_max,
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema,
        )

    def _sample_outcome(self, corpus: str) -> AnalysisOutcome:
        data = sample_analysis(
            report_id=report_title_from_corpus(corpus),
            score_max=self._normalizer.score_max,
        )
        result = AnalysisResult.from_dict(data)
        return AnalysisOutcome(result=result, markdown=self._render(result), used_sample=True)

    def _render(self, result: AnalysisResult) -> str:
        return render_markdown_summary(result, self._normalizer.score_max)
