import codecs
from unittest.mock import patch

import pytest

from docinsight.extraction.html import (
    EMPTY_WARNING,
    FALLBACK_WARNING,
    HtmlExtractor,
    sanitize_html,
)
from docinsight.extraction.models import NO_CONTENT


def _extract(markup: bytes):  # type: ignore[no-untyped-def]
    return HtmlExtractor().extract(markup)


def _broken_parser(*args: object, **kwargs: object) -> None:
    raise RuntimeError("parser exploded")


class TestDomExtraction:
    def test_quarterly_report_scenario(self) -> None:
        doc = _extract(
            b"<html><head><title>Q3</title></head><body><script>evil()</script>"
            b"<p>Revenue up 10%</p></body></html>"
        )
        assert "Revenue up 10%" in doc.plain_text
        assert "evil()" not in doc.plain_text
        assert doc.title == "Q3"
        assert doc.strategy == "html"
        assert doc.warnings == []

    def test_removes_script_style_and_noscript(self, report_html_bytes: bytes) -> None:
        doc = _extract(report_html_bytes)
        assert "trackVisitor" not in doc.plain_text
        assert "color: red" not in doc.plain_text
        assert "Enable JavaScript" not in doc.plain_text

    def test_reads_title_and_meta_description(self, report_html_bytes: bytes) -> None:
        doc = _extract(report_html_bytes)
        assert doc.title == "Q3 Operations"
        assert doc.description == "Monthly ops review"

    def test_title_is_first_line_of_text(self, report_html_bytes: bytes) -> None:
        doc = _extract(report_html_bytes)
        assert doc.plain_text.split("\n")[0] == "Q3 Operations"

    def test_whitespace_is_normalized(self, report_html_bytes: bytes) -> None:
        doc = _extract(report_html_bytes)
        assert "  " not in doc.plain_text
        assert "\n\n" not in doc.plain_text
        assert "Orders rose to 120" in doc.plain_text

    def test_nested_noscript_script(self) -> None:
        doc = _extract(b"<body><noscript><script>leak()</script>x</noscript><p>ok</p></body>")
        assert "leak" not in doc.plain_text
        assert doc.plain_text == "ok"

    def test_fragment_without_body(self) -> None:
        doc = _extract(b"<title>Ops</title><div>Cost per stop 4.10</div>")
        assert doc.title == "Ops"
        assert doc.plain_text == "Ops\nCost per stop 4.10"

    def test_entities_are_decoded(self) -> None:
        doc = _extract(b"<p>R&amp;D &lt;5%&gt; &quot;flat&quot;</p>")
        assert doc.plain_text == 'R&D <5%> "flat"'

    def test_malformed_markup_does_not_raise(self) -> None:
        doc = _extract(b"<html><body><p>Unclosed <b>bold <div>text</p></span>")
        assert "Unclosed" in doc.plain_text
        assert "text" in doc.plain_text

    def test_utf8_bom_is_stripped(self) -> None:
        doc = _extract(codecs.BOM_UTF8 + "<p>Umsatz größer</p>".encode("utf-8"))
        assert doc.plain_text == "Umsatz größer"
        assert "\ufffd" not in doc.plain_text
        assert "\ufeff" not in doc.plain_text

    def test_latin1_bytes_record_warning(self) -> None:
        doc = _extract("<p>Café</p>".encode("latin-1"))
        assert doc.plain_text == "Café"
        assert any("latin-1" in w for w in doc.warnings)


class TestEmptyContent:
    @pytest.mark.parametrize(
        "markup",
        [
            b"",
            b"   \n\t ",
            b"<html><body></body></html>",
            b"<script>only()</script><style>p{}</style>",
        ],
    )
    def test_returns_sentinel(self, markup: bytes) -> None:
        doc = _extract(markup)
        assert doc.plain_text == NO_CONTENT
        assert EMPTY_WARNING in doc.warnings


class TestRegexFallback:
    def test_falls_back_when_parser_raises(self) -> None:
        with patch("docinsight.extraction.html.BeautifulSoup", side_effect=_broken_parser):
            doc = _extract(
                b"<html><head><title>Q3</title>"
                b"<meta name='description' content='Ops &amp; sales'></head>"
                b"<body><SCRIPT type='text/javascript'>evil()</SCRIPT>"
                b"<style>.a{}</style><p>Revenue&nbsp;up &#39;10%&#39;</p></body></html>"
            )
        assert doc.strategy == "html-fallback"
        assert any(w.startswith(FALLBACK_WARNING) for w in doc.warnings)
        assert doc.title == "Q3"
        assert doc.description == "Ops & sales"
        assert "evil()" not in doc.plain_text
        assert ".a{}" not in doc.plain_text
        assert "Revenue up '10%'" in doc.plain_text

    def test_fallback_drops_unterminated_script(self) -> None:
        with patch("docinsight.extraction.html.BeautifulSoup", side_effect=_broken_parser):
            doc = _extract(b"<p>Visible</p><script>never closed(")
        assert doc.plain_text == "Visible"

    def test_fallback_decodes_amp_last(self) -> None:
        with patch("docinsight.extraction.html.BeautifulSoup", side_effect=_broken_parser):
            doc = _extract(b"<p>&amp;lt;tag&amp;gt;</p>")
        assert doc.plain_text == "&lt;tag&gt;"

    def test_fallback_empty_returns_sentinel(self) -> None:
        with patch("docinsight.extraction.html.BeautifulSoup", side_effect=_broken_parser):
            doc = _extract(b"<div><script>x()</script></div>")
        assert doc.plain_text == NO_CONTENT
        assert EMPTY_WARNING in doc.warnings


class TestSanitizeHtml:
    def test_removes_active_content(self) -> None:
        markup = (
            '<div onclick="steal()"><script>x()</script><iframe src="a"></iframe>'
            '<a href="javascript:alert(1)">link</a><style>b{}</style>text</div>'
        )
        cleaned = sanitize_html(markup)
        assert "script" not in cleaned
        assert "iframe" not in cleaned
        assert "onclick" not in cleaned
        assert "javascript:" not in cleaned
        assert "style" not in cleaned
        assert "link" in cleaned
        assert "text" in cleaned

    def test_exported_from_extraction_package(self) -> None:
        import docinsight.extraction as extraction

        assert extraction.sanitize_html is sanitize_html
        assert "sanitize_html" in extraction.__all__
