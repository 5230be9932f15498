class ProcessorError(Exception):
    """Base exception for report processing errors."""


class EmptyCorpusError(ProcessorError):
    """Raised when a report has no files or no text to analyze."""
