from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for chat providers that answer the analysis prompt.

    ``provider`` names the backing service in logs (``openai``, ``groq``,
    ``example``...).
    """

    provider: str = "unknown"

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Send one system + user prompt pair and return the reply text.

        Args:
            model: Provider model identifier.
            temperature: Already clamped by the caller.
            json_schema: JSON Schema the reply is asked to follow; providers
                that cannot enforce it may ignore it.

        Raises:
            AnalysisNetworkError: if the provider cannot be reached or rejects the call.
            AnalysisError: if the provider answers without any content.
        """
