from abc import ABC, abstractmethod


class BaseInferenceClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the completion text.

        Raises:
            InferenceTimeoutError: if the provider does not answer in time.
            InferenceNetworkError: on transport or API failures.
            AnalysisError: if the provider returns no content.
        """
