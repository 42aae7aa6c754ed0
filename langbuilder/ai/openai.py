"""OpenAI GPT AI provider."""

from typing import Optional

from langbuilder.ai.base import AIProvider, json_instruction


class OpenAIProvider(AIProvider):
    """OpenAI GPT API provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
    ):
        self.api_key = api_key
        self.model = model
        self._client = None

    def _get_client(self):
        """Lazy-load the OpenAI client."""
        if self._client is None:
            try:
                import openai
                self._client = openai.OpenAI(api_key=self.api_key)
            except ImportError:
                raise ImportError(
                    "openai package not installed. "
                    "Install with: pip install openai"
                )
        return self._client

    def is_available(self) -> bool:
        """Check if OpenAI is configured."""
        return bool(self.api_key)

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 1000,
        response_schema: Optional[dict] = None,
    ) -> str:
        """Generate text using GPT."""
        if not self.is_available():
            raise ValueError("OpenAI API key not configured")

        client = self._get_client()

        if response_schema:
            # json_object mode requires the word JSON in the prompt
            prompt += json_instruction(response_schema)

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
        }
        if response_schema:
            kwargs["response_format"] = {"type": "json_object"}

        response = client.chat.completions.create(**kwargs)

        return response.choices[0].message.content or ""
