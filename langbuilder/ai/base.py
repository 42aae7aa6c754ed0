"""Base class for AI providers."""

from abc import ABC, abstractmethod
from typing import Optional


class AIProvider(ABC):
    """Abstract base class for AI providers."""

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 1000,
        response_schema: Optional[dict] = None,
    ) -> str:
        """
        Generate text from a prompt.

        Args:
            prompt: The user prompt
            system: Optional system prompt
            max_tokens: Maximum tokens in response
            response_schema: Optional JSON schema the reply must follow

        Returns:
            Generated text
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is configured and available."""
        pass


def json_instruction(response_schema: dict) -> str:
    """Prompt suffix for providers without native structured output."""
    fields = ", ".join(f"'{name}'" for name in response_schema.get("properties", {}))
    return (
        "\n\nReply with ONLY a JSON object with the fields "
        f"{fields}. No markdown, no explanation."
    )
