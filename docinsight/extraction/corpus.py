"""Corpus assembly for the analysis prompt.

The ``File: <name>`` delimiters are read back by prompts and by corpora
already stored with reports, so their layout must not change.
"""

from dataclasses import dataclass

from docinsight.extraction.models import ExtractedDocument


@dataclass(frozen=True)
class CorpusEntry:
    file_name: str
    mime_type: str
    document: ExtractedDocument | None = None

    def render(self) -> str:
        if self.document is None:
            return f"File: {self.file_name} ({self.mime_type})\n[Text extraction failed]\n"
        return f"File: {self.file_name}\n{self.document.plain_text}"


def build_corpus(entries: list[CorpusEntry], title: str | None = None) -> str:
    """Join per-file texts into one corpus, headed by the report title when given."""
    header = f"Report Title: {title}\n\n" if title else ""
    return header + "\n\n".join(entry.render() for entry in entries)


def report_title_from_corpus(corpus: str) -> str | None:
    """Read back the title written by build_corpus, if any."""
    marker = "Report Title:"
    if not corpus.startswith(marker):
        return None
    return corpus[len(marker):].split("\n", 1)[0].strip() or None
