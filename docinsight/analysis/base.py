from abc import ABC, abstractmethod

from docinsight.analysis.models import AnalysisOutcome


class BaseAnalyzer(ABC):
    """Contract for components that turn a report corpus into an analysis."""

    @abstractmethod
    def analyze(self, corpus: str) -> AnalysisOutcome:
        """Analyze the corpus built from a report's files.

        Args:
            corpus: Text produced by build_corpus ("File: <name>" delimited).

        Returns:
            AnalysisOutcome with the structured result and markdown summary.

        Raises:
            AnalysisError: when the analysis cannot be produced and no fallback applies.
        """
