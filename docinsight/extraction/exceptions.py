class ExtractionError(Exception):
    """Base exception for extraction failures surfaced to the caller."""


class UnsupportedTypeError(ExtractionError):
    """Raised when a file's declared MIME type has no extraction strategy."""

    def __init__(self, mime_type: str, file_name: str = "") -> None:
        self.mime_type = mime_type
        self.file_name = file_name
        target = f" for '{file_name}'" if file_name else ""
        super().__init__(f"Unsupported file type{target}: {mime_type or '<empty>'}")
