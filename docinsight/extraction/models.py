from dataclasses import dataclass, field

NO_CONTENT = "no content available"

HTML = "text/html"
PDF = "application/pdf"
JPEG = "image/jpeg"
PNG = "image/png"

SUPPORTED_MIME_TYPES = frozenset({HTML, PDF, JPEG, PNG})
MIME_ALIASES = {"image/jpg": JPEG, "image/pjpeg": JPEG}


def normalize_mime_type(declared: str) -> str:
    """Lowercase, drop parameters such as '; charset=utf-8', resolve aliases."""
    base = declared.split(";", 1)[0].strip().lower()
    return MIME_ALIASES.get(base, base)


@dataclass(frozen=True)
class FileBlob:
    """One uploaded file as handed over by the upload handler."""

    data: bytes
    declared_mime_type: str
    original_name: str

    @property
    def mime_type(self) -> str:
        return normalize_mime_type(self.declared_mime_type)


@dataclass
class ExtractedDocument:
    """Best-effort plain text of one file plus notes on how it degraded."""

    plain_text: str
    strategy: str
    title: str | None = None
    description: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.plain_text == NO_CONTENT
