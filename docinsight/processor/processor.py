from docinsight.analysis.base import BaseAnalyzer
from docinsight.analysis.factory import AnalyzerFactory
from docinsight.config.settings import Settings
from docinsight.extraction.engine import ExtractionEngine
from docinsight.extraction.factory import ExtractionEngineFactory
from docinsight.extraction.models import FileBlob
from docinsight.logging.logger import Log
from docinsight.processor.models import ReportAnalysis
from docinsight.processor.pipeline import PipelineContext, PipelineStep
from docinsight.processor.steps import AnalyzeStep, BuildCorpusStep, ExtractFilesStep


class ReportProcessor:
    """Orchestrates report analysis.

    Pipeline: extract every file -> build corpus -> analyze -> summarize.
    """

    def __init__(self, engine: ExtractionEngine, analyzer: BaseAnalyzer) -> None:
        self._steps: list[PipelineStep] = [
            ExtractFilesStep(engine),
            BuildCorpusStep(),
            AnalyzeStep(analyzer),
        ]

    def process(self, blobs: list[FileBlob], title: str | None = None) -> ReportAnalysis:
        """Run the full pipeline for the files of one report.

        Raises:
            EmptyCorpusError: if there are no files or none yielded text.
            AnalysisError: if analysis fails and no sample fallback is configured.
        """
        Log.info(f"Processing report '{title or ''}' with {len(blobs)} files")
        context = PipelineContext(title=title, blobs=list(blobs))
        for step in self._steps:
            context = step.run(context)
        if context.outcome is None:
            raise ValueError("Pipeline finished without an analysis outcome")
        return ReportAnalysis(
            title=title,
            corpus=context.corpus,
            outcome=context.outcome,
            documents={
                entry.file_name: entry.document
                for entry in context.entries
                if entry.document is not None
            },
            failures=context.failures,
        )


def build_processor(settings: Settings) -> ReportProcessor:
    """Build a ReportProcessor with all adapters named in settings."""
    return ReportProcessor(
        engine=ExtractionEngineFactory.create(settings),
        analyzer=AnalyzerFactory.create(settings),
    )
