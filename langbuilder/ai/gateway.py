"""Translation and sentence generation through an AI provider."""

import json
import logging
import random
from typing import Optional

from langbuilder.ai.base import AIProvider
from langbuilder.config import Config
from langbuilder.core.models import GeneratedSentence, Translation, Word
from langbuilder.errors import GatewayError


logger = logging.getLogger(__name__)

MAX_SENTENCE_WORDS = 4

TRANSLATION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "indonesianTranslation": {"type": "STRING"},
        "wordType": {"type": "STRING"},
    },
    "required": ["indonesianTranslation", "wordType"],
}

TRANSLATE_PROMPT = (
    'Translate the Myanmar word/phrase "{word}" to Indonesian and detect its '
    "word type (Noun, Verb, Adjective, or Slang). Provide the output in JSON "
    "format with 'indonesianTranslation' and 'wordType' fields."
)

SENTENCE_PROMPT = (
    'Strictly adhering only to the following words: "{words}", construct a '
    "grammatically correct sentence or question or phrase or clause or slang "
    "of Indonesian language, without adding any other words. Output: "
    "Line 1: Myanmar Translation of the sentence. Line 2: Indonesian Sentence."
)


def build_provider(config: Config) -> Optional[AIProvider]:
    """Create the configured provider, or None when no key is set."""
    if not config.ai_enabled:
        return None

    if config.provider == "anthropic":
        from langbuilder.ai.anthropic import AnthropicProvider
        return AnthropicProvider(api_key=config.api_key, model=config.model)
    if config.provider == "openai":
        from langbuilder.ai.openai import OpenAIProvider
        return OpenAIProvider(api_key=config.api_key, model=config.model)

    from langbuilder.ai.gemini import GeminiProvider
    return GeminiProvider(api_key=config.api_key, model=config.model)


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ``` fence some models add around JSON."""
    content = text.strip()
    if content.startswith("```"):
        lines = content.split("\n")
        if lines[-1].strip().startswith("```"):
            lines = lines[:-1]
        content = "\n".join(lines[1:])
    return content.strip()


def parse_translation(text: str) -> Translation:
    """Parse the JSON translation reply."""
    try:
        data = json.loads(strip_code_fence(text))
    except json.JSONDecodeError as e:
        raise GatewayError(f"Could not parse translation response: {e}")

    if not isinstance(data, dict):
        raise GatewayError("Translation response is not a JSON object")

    translation = data.get("indonesianTranslation")
    word_type = data.get("wordType")
    if not isinstance(translation, str) or not isinstance(word_type, str):
        raise GatewayError(
            "Translation response is missing 'indonesianTranslation' or 'wordType'"
        )

    return Translation(indonesian=translation, word_type=word_type)


def parse_sentence(text: str) -> GeneratedSentence:
    """Line 1 is the Myanmar rendering, line 2 the Indonesian sentence."""
    lines = [line.strip() for line in (text or "").split("\n")]
    myanmar = lines[0] if len(lines) > 0 else ""
    indonesian = lines[1] if len(lines) > 1 else ""
    return GeneratedSentence(myanmar=myanmar, indonesian=indonesian)


class AIGateway:
    """Builds prompts, calls the provider and parses replies.

    Holds no mutable state, so calls are safe from a worker thread.
    """

    def __init__(self, provider: AIProvider):
        self.provider = provider

    @classmethod
    def from_config(cls, config: Config) -> Optional["AIGateway"]:
        """Gateway for the configured provider, or None without a key."""
        provider = build_provider(config)
        return cls(provider) if provider else None

    def _call(self, prompt: str, **kwargs) -> str:
        try:
            return self.provider.generate(prompt, **kwargs)
        except Exception as e:
            logger.error("AI request failed: %s", e)
            raise GatewayError(str(e) or e.__class__.__name__) from e

    def translate(self, word: str) -> Translation:
        """
        Translate a Myanmar word and classify it.

        Args:
            word: The Myanmar word or phrase

        Returns:
            Translation with the Indonesian text and word type

        Raises:
            GatewayError: If the request fails or the reply is not usable JSON
        """
        logger.info("Translating %r", word)
        response = self._call(
            TRANSLATE_PROMPT.format(word=word),
            response_schema=TRANSLATION_SCHEMA,
        )
        return parse_translation(response)

    @staticmethod
    def pick_words(words: list[Word], rng: Optional[random.Random] = None) -> list[Word]:
        """Uniform sample without replacement of up to four words."""
        rng = rng or random.Random()
        return rng.sample(words, min(len(words), MAX_SENTENCE_WORDS))

    def generate_sentence(self, selected: list[Word]) -> GeneratedSentence:
        """Ask for a sentence built only from the selected Indonesian words."""
        indonesian_words = ", ".join(w.indonesian for w in selected)
        logger.info("Generating sentence from %r", indonesian_words)
        response = self._call(SENTENCE_PROMPT.format(words=indonesian_words))
        return parse_sentence(response)
