from docinsight.analysis.analyzer import Analyzer
from docinsight.analysis.base import BaseAnalyzer
from docinsight.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    MalformedAIResponseError,
)
from docinsight.analysis.factory import AnalyzerFactory
from docinsight.analysis.models import AnalysisOutcome, AnalysisResult
from docinsight.analysis.normalizer import ResponseNormalizer

__all__ = [
    "AnalysisError",
    "AnalysisNetworkError",
    "AnalysisOutcome",
    "AnalysisResult",
    "Analyzer",
    "AnalyzerFactory",
    "BaseAnalyzer",
    "MalformedAIResponseError",
    "ResponseNormalizer",
]
