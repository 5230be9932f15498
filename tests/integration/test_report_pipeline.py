import json

import pytest

from docinsight.config.settings import Settings
from docinsight.extraction.models import NO_CONTENT, FileBlob
from docinsight.ocr.example_client_adapter import ExampleOcrAdapter
from docinsight.processor.exceptions import EmptyCorpusError
from docinsight.processor.processor import ReportProcessor, build_processor


@pytest.mark.integration
class TestReportPipeline:
    def test_mixed_upload(
        self,
        offline_processor: ReportProcessor,
        sample_pdf_bytes: bytes,
        report_html_bytes: bytes,
        png_bytes: bytes,
    ) -> None:
        blobs = [
            FileBlob(sample_pdf_bytes, "application/pdf", "revenue.pdf"),
            FileBlob(report_html_bytes, "text/html; charset=utf-8", "ops.html"),
            FileBlob(png_bytes, "image/png", "chart.png"),
            FileBlob(b"PK\x03\x04", "application/zip", "archive.zip"),
        ]

        report = offline_processor.process(blobs, title="Q3 Operations")

        assert report.corpus.startswith("Report Title: Q3 Operations\n\nFile: revenue.pdf\n")
        assert "Quarterly revenue 42000 CAD" in report.corpus
        assert "File: ops.html\nQ3 Operations\n" in report.corpus
        assert "trackVisitor" not in report.corpus
        assert f"File: chart.png\n{ExampleOcrAdapter.PLACEHOLDER}" in report.corpus
        assert "File: archive.zip (application/zip)\n[Text extraction failed]" in report.corpus
        assert report.documents["revenue.pdf"].strategy == "pdf-text"
        assert report.documents["chart.png"].strategy == "image-ocr"
        assert [f.file_name for f in report.failures] == ["archive.zip"]

        data = json.loads(json.dumps(report.to_dict()))
        assert data["score"] == 82
        assert len(data["ai_json"]["next_month_plan"]["weekly_plan"]) == 4
        assert data["ai_markdown"].startswith("# Executive Summary")

    def test_scanned_pdf_goes_through_ocr(
        self, offline_processor: ReportProcessor, empty_pdf_bytes: bytes
    ) -> None:
        report = offline_processor.process(
            [FileBlob(empty_pdf_bytes, "application/pdf", "scan.pdf")]
        )
        document = report.documents["scan.pdf"]
        assert document.strategy == "pdf-ocr"
        assert document.plain_text == ExampleOcrAdapter.PLACEHOLDER
        assert document.warnings

    def test_empty_html_still_produces_corpus(self, offline_processor: ReportProcessor) -> None:
        report = offline_processor.process([FileBlob(b"", "text/html", "blank.html")])
        assert report.corpus == f"File: blank.html\n{NO_CONTENT}"

    def test_only_unsupported_files_raise(self, offline_processor: ReportProcessor) -> None:
        with pytest.raises(EmptyCorpusError):
            offline_processor.process([FileBlob(b"x", "application/zip", "a.zip")])

    def test_ten_point_scale(self, report_html_bytes: bytes) -> None:
        settings = Settings(analysis_provider="example", ocr_provider="example", score_max=10)
        report = build_processor(settings).process(
            [FileBlob(report_html_bytes, "text/html", "ops.html")]
        )
        assert report.outcome.result.score == 8.2
        assert "## Overall Performance Score: 8.2/10" in report.outcome.markdown
