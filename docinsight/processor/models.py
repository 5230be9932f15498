from dataclasses import dataclass, field

from docinsight.analysis.models import AnalysisOutcome
from docinsight.extraction.models import ExtractedDocument


@dataclass(frozen=True)
class FileFailure:
    """A file that was skipped during extraction, with the reason."""

    file_name: str
    mime_type: str
    reason: str


@dataclass
class ReportAnalysis:
    """Everything produced for one report: corpus, per-file text and the analysis."""

    title: str | None
    corpus: str
    outcome: AnalysisOutcome
    documents: dict[str, ExtractedDocument] = field(default_factory=dict)
    failures: list[FileFailure] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "ai_json": self.outcome.result.to_dict(),
            "ai_markdown": self.outcome.markdown,
            "score": self.outcome.result.score,
            "used_sample": self.outcome.used_sample,
            "failed_files": [f.file_name for f in self.failures],
        }
