"""Turns raw model replies into schema-conformant analysis results."""

from typing import Any

from docinsight.analysis.models import AnalysisResult
from docinsight.analysis.repair import parse_json_object
from docinsight.analysis.schema import DEFAULT_SCORE_MAX, FieldSpec, analysis_schema, to_json_schema
from docinsight.analysis.validator import conform
from docinsight.logging.logger import Log


class ResponseNormalizer:
    """Parses, repairs and validates model output against the analysis schema.

    Only an irreparable reply raises (MalformedAIResponseError); schema gaps
    in a parseable reply are filled with defaults and logged.
    """

    def __init__(self, score_max: int = DEFAULT_SCORE_MAX) -> None:
        self._score_max = score_max
        self._schema: FieldSpec = analysis_schema(score_max)

    @property
    def score_max(self) -> int:
        return self._score_max

    @property
    def json_schema(self) -> dict[str, Any]:
        return to_json_schema(self._schema)

    def normalize(self, raw_text: str) -> AnalysisResult:
        data = parse_json_object(raw_text)
        conformed, issues = conform(self._schema, data)
        if issues:
            Log.warning(f"AI response had {len(issues)} schema gaps; filled with defaults")
            for issue in issues:
                Log.debug(f"Schema gap: {issue}")
        return AnalysisResult.from_dict(conformed)
