from docinsight.analysis.base import BaseAnalyzer
from docinsight.extraction.corpus import CorpusEntry, build_corpus
from docinsight.extraction.engine import ExtractionEngine
from docinsight.extraction.exceptions import ExtractionError
from docinsight.logging.logger import Log
from docinsight.ocr.exceptions import OcrError
from docinsight.processor.exceptions import EmptyCorpusError
from docinsight.processor.models import FileFailure
from docinsight.processor.pipeline import PipelineContext, PipelineStep


class ExtractFilesStep(PipelineStep):
    def __init__(self, engine: ExtractionEngine) -> None:
        self._engine = engine

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.blobs:
            raise EmptyCorpusError("No files to analyze")
        for blob in context.blobs:
            try:
                document = self._engine.extract(blob)
            except (ExtractionError, OcrError) as exc:
                Log.error(f"Failed to extract text from '{blob.original_name}': {exc}")
                context.failures.append(
                    FileFailure(blob.original_name, blob.declared_mime_type, str(exc))
                )
                context.entries.append(CorpusEntry(blob.original_name, blob.declared_mime_type))
                continue
            if document.is_empty:
                Log.warning(f"No text found in '{blob.original_name}'")
            context.entries.append(
                CorpusEntry(blob.original_name, blob.declared_mime_type, document)
            )
        return context


class BuildCorpusStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if all(entry.document is None for entry in context.entries):
            raise EmptyCorpusError("No text content available for analysis")
        context.corpus = build_corpus(context.entries, title=context.title)
        Log.info(
            f"Built corpus of {len(context.corpus)} chars from {len(context.entries)} files "
            f"({len(context.failures)} failed)"
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.corpus:
            raise ValueError("PipelineContext.corpus must be set before analysis")
        context.outcome = self._analyzer.analyze(context.corpus)
        return context
