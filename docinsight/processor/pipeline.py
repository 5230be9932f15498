from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docinsight.analysis.models import AnalysisOutcome
from docinsight.extraction.corpus import CorpusEntry
from docinsight.extraction.models import FileBlob
from docinsight.processor.models import FileFailure


@dataclass(slots=True)
class PipelineContext:
    title: str | None
    blobs: list[FileBlob] = field(default_factory=list)
    entries: list[CorpusEntry] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    corpus: str = ""
    outcome: AnalysisOutcome | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
