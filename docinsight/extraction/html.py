"""HTML to plain text, DOM-first with a regex fallback."""

import re

from bs4 import BeautifulSoup

from docinsight.extraction.encoding import decode_bytes
from docinsight.extraction.models import NO_CONTENT, ExtractedDocument
from docinsight.extraction.text import join_title, normalize_whitespace

_NOISE_TAGS = ("script", "style", "noscript")

_NOISE_BLOCK = re.compile(
    r"<(script|style|noscript)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
_UNCLOSED_NOISE = re.compile(r"<(script|style|noscript)\b[^>]*>.*\Z", re.IGNORECASE | re.DOTALL)
_TITLE = re.compile(r"<title\b[^>]*>(.*?)</title\s*>", re.IGNORECASE | re.DOTALL)
_META_DESCRIPTION = re.compile(
    r"<meta\b(?=[^>]*\bname\s*=\s*[\"']?description[\"']?)[^>]*"
    r"\bcontent\s*=\s*(?:\"([^\"]*)\"|'([^']*)')",
    re.IGNORECASE,
)
_TAG = re.compile(r"<[^>]+>")
_ENTITIES = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)

_IFRAME_BLOCK = re.compile(r"<iframe\b[^>]*>.*?</iframe\s*>", re.IGNORECASE | re.DOTALL)
_EVENT_HANDLER = re.compile(r"\s+on\w+\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s>]+)", re.IGNORECASE)
_JAVASCRIPT_URL = re.compile(r"javascript\s*:", re.IGNORECASE)

FALLBACK_WARNING = "fell back to regex tag stripping"
EMPTY_WARNING = "no text content found in markup"


class HtmlExtractor:
    """Turns HTML bytes into whitespace-normalized text, title and description."""

    def extract(self, data: bytes) -> ExtractedDocument:
        decoded = decode_bytes(data)
        warnings = list(decoded.warnings)
        try:
            title, description, body = self._extract_dom(decoded.text)
            strategy = "html"
        except Exception as exc:
            warnings.append(f"{FALLBACK_WARNING} ({type(exc).__name__}: {exc})")
            title, description, body = self._extract_regex(decoded.text)
            strategy = "html-fallback"

        text = join_title(title, body)
        if not text:
            warnings.append(EMPTY_WARNING)
            text = NO_CONTENT
        return ExtractedDocument(
            plain_text=text,
            strategy=strategy,
            title=title,
            description=description,
            warnings=warnings,
        )

    def _extract_dom(self, markup: str) -> tuple[str | None, str | None, str]:
        soup = BeautifulSoup(markup, "html.parser")
        for tag in soup.find_all(_NOISE_TAGS):
            if not tag.decomposed:
                tag.decompose()

        title_tag = soup.find("title")
        title = _clean(title_tag.get_text(" ")) if title_tag else None

        description = None
        meta = soup.find("meta", attrs={"name": re.compile(r"^description$", re.I)})
        if meta is not None and meta.get("content"):
            description = _clean(str(meta["content"]))

        root = soup.body if soup.body is not None else soup
        if root is soup and title_tag is not None:
            title_tag.decompose()
        body = normalize_whitespace(root.get_text("\n"))
        return title, description, body

    def _extract_regex(self, markup: str) -> tuple[str | None, str | None, str]:
        cleaned = _UNCLOSED_NOISE.sub(" ", _NOISE_BLOCK.sub(" ", markup))

        title = None
        title_match = _TITLE.search(cleaned)
        if title_match:
            title = _clean(_decode_entities(_TAG.sub(" ", title_match.group(1))))
            cleaned = cleaned[: title_match.start()] + "\n" + cleaned[title_match.end():]

        description = None
        meta_match = _META_DESCRIPTION.search(cleaned)
        if meta_match:
            raw = meta_match.group(1) if meta_match.group(1) is not None else meta_match.group(2)
            description = _clean(_decode_entities(raw))

        body = _decode_entities(_TAG.sub(" ", cleaned))
        return title, description, normalize_whitespace(body)


def sanitize_html(markup: str) -> str:
    """Remove active content (scripts, styles, iframes, handlers) from markup.

    Public helper for callers that store uploaded HTML or render it back to a
    browser. Text extraction does not go through it.
    """
    cleaned = _NOISE_BLOCK.sub("", markup)
    cleaned = _IFRAME_BLOCK.sub("", cleaned)
    cleaned = _EVENT_HANDLER.sub("", cleaned)
    return _JAVASCRIPT_URL.sub("", cleaned)


def _decode_entities(text: str) -> str:
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def _clean(text: str) -> str | None:
    return normalize_whitespace(text).replace("\n", " ") or None
