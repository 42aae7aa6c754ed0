"""Google Gemini AI provider."""

from typing import Optional

from google import genai
from google.genai import types

from langbuilder.ai.base import AIProvider


class GeminiProvider(AIProvider):
    """Gemini API provider with native JSON output."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-3-flash-preview",
    ):
        self.api_key = api_key
        self.model = model
        self._client = None

    def _get_client(self) -> genai.Client:
        """Lazy-create the Gemini client."""
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def is_available(self) -> bool:
        """Check if Gemini is configured."""
        return bool(self.api_key)

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 1000,
        response_schema: Optional[dict] = None,
    ) -> str:
        """Generate text using Gemini."""
        if not self.is_available():
            raise ValueError("Gemini API key not configured")

        client = self._get_client()

        config_kwargs = {"max_output_tokens": max_tokens}
        if system:
            config_kwargs["system_instruction"] = system
        if response_schema:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_schema"] = response_schema

        response = client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(**config_kwargs),
        )

        return response.text or ""
