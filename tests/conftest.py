import io
import json
from typing import Any

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docinsight.analysis.sample import sample_analysis


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Quarterly revenue 42000 CAD")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text layer (stands in for a scanned page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def report_html_bytes() -> bytes:
    return (
        b"<!DOCTYPE html><html><head><title>Q3 Operations</title>"
        b'<meta name="description" content="Monthly ops review">'
        b"<style>body { color: red; }</style></head>"
        b"<body><h1>Summary</h1><script>trackVisitor();</script>"
        b"<p>Orders rose   to 120\n\n\n this month.</p>"
        b"<noscript>Enable JavaScript</noscript>"
        b"<p>On-time delivery at 92%</p></body></html>"
    )


@pytest.fixture()
def valid_analysis() -> dict[str, Any]:
    """A complete, schema-conformant analysis payload."""
    return sample_analysis(report_id="Q3 Operations")


@pytest.fixture()
def valid_analysis_json(valid_analysis: dict[str, Any]) -> str:
    return json.dumps(valid_analysis)
