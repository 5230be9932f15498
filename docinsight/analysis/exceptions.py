class AnalysisError(Exception):
    """Raised when analysis of a corpus fails."""


class MalformedAIResponseError(AnalysisError):
    """Raised when the model reply cannot be parsed as a JSON object, even after repair."""

    def __init__(self, message: str, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
