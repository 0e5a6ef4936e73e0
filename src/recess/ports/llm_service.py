"""LLM service interface."""

from typing import Protocol


class LLMServiceError(RuntimeError):
    """Raised when the language service fails or times out."""

    pass


class LLMService(Protocol):
    """Interface for short-form LLM text generation."""

    def complete(
        self,
        system: str,
        prompt: str,
        max_tokens: int = 60,
        temperature: float = 0.7,
    ) -> str:
        """Generate a reply to prompt under a system instruction.

        Raises LLMServiceError on any failure.
        """
        ...
