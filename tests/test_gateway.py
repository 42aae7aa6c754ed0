"""Tests for the AI gateway with a scripted provider."""

import random

import pytest

from langbuilder.ai.base import AIProvider, json_instruction
from langbuilder.ai.gateway import (
    TRANSLATION_SCHEMA,
    AIGateway,
    build_provider,
    parse_sentence,
    parse_translation,
    strip_code_fence,
)
from langbuilder.config import Config
from langbuilder.core.models import Word
from langbuilder.errors import GatewayError


class FakeProvider(AIProvider):
    """Returns canned replies and records prompts."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, prompt, system=None, max_tokens=1000, response_schema=None):
        self.calls.append({"prompt": prompt, "response_schema": response_schema})
        if self.error:
            raise self.error
        return self.reply

    def is_available(self):
        return True


def words(count):
    return [Word(str(i), f"my{i}", f"id{i}", "Noun") for i in range(count)]


class TestParseTranslation:
    """Test JSON translation parsing."""

    def test_valid(self):
        t = parse_translation('{"indonesianTranslation":"makan","wordType":"Verb"}')
        assert t.indonesian == "makan"
        assert t.word_type == "Verb"

    def test_code_fence(self):
        t = parse_translation('```json\n{"indonesianTranslation":"air","wordType":"Noun"}\n```')
        assert t.indonesian == "air"

    def test_invalid_json(self):
        with pytest.raises(GatewayError, match="Could not parse"):
            parse_translation("makan (Verb)")

    def test_not_an_object(self):
        with pytest.raises(GatewayError):
            parse_translation('["makan", "Verb"]')

    def test_missing_field(self):
        with pytest.raises(GatewayError, match="wordType"):
            parse_translation('{"indonesianTranslation":"makan"}')

    def test_strip_code_fence_plain_text(self):
        assert strip_code_fence("  {} ") == "{}"


class TestParseSentence:
    """Test line-delimited sentence parsing."""

    def test_two_lines(self):
        s = parse_sentence("မင်္ဂလာပါ\nSelamat pagi")
        assert s.myanmar == "မင်္ဂလာပါ"
        assert s.indonesian == "Selamat pagi"

    def test_one_line(self):
        s = parse_sentence("မင်္ဂလာပါ")
        assert s.myanmar == "မင်္ဂလာပါ"
        assert s.indonesian == ""

    def test_lines_are_stripped_and_extra_ignored(self):
        s = parse_sentence("  a  \n  b \nc")
        assert (s.myanmar, s.indonesian) == ("a", "b")

    def test_empty(self):
        s = parse_sentence("")
        assert (s.myanmar, s.indonesian) == ("", "")


class TestAIGateway:
    """Test prompts and error mapping."""

    def test_translate_prompt_and_schema(self):
        provider = FakeProvider('{"indonesianTranslation":"makan","wordType":"Verb"}')
        gateway = AIGateway(provider)

        result = gateway.translate("စား")

        assert result.indonesian == "makan"
        call = provider.calls[0]
        assert '"စား"' in call["prompt"]
        assert "'indonesianTranslation' and 'wordType'" in call["prompt"]
        assert call["response_schema"] == TRANSLATION_SCHEMA

    def test_translate_provider_error(self):
        gateway = AIGateway(FakeProvider(error=RuntimeError("quota exceeded")))
        with pytest.raises(GatewayError, match="quota exceeded"):
            gateway.translate("စား")

    def test_generate_sentence_uses_indonesian_words(self):
        provider = FakeProvider("မင်္ဂလာပါ\nSelamat pagi")
        gateway = AIGateway(provider)

        result = gateway.generate_sentence(words(3))

        assert result.indonesian == "Selamat pagi"
        prompt = provider.calls[0]["prompt"]
        assert '"id0, id1, id2"' in prompt
        assert "my0" not in prompt
        assert provider.calls[0]["response_schema"] is None

    def test_pick_words_caps_at_four(self):
        picked = AIGateway.pick_words(words(10), random.Random(1))
        assert len(picked) == 4
        assert len({w.id for w in picked}) == 4

    def test_pick_words_uses_all_when_few(self):
        picked = AIGateway.pick_words(words(2), random.Random(1))
        assert sorted(w.id for w in picked) == ["0", "1"]


class TestBuildProvider:
    """Test provider selection from config."""

    def test_no_key(self):
        assert build_provider(Config(api_key=None)) is None
        assert AIGateway.from_config(Config()) is None

    def test_anthropic(self):
        provider = build_provider(Config(provider="anthropic", api_key="k", model="m"))
        assert provider.__class__.__name__ == "AnthropicProvider"
        assert provider.model == "m"
        assert provider.is_available()

    def test_openai(self):
        provider = build_provider(Config(provider="openai", api_key="k"))
        assert provider.__class__.__name__ == "OpenAIProvider"

    def test_gemini(self):
        provider = build_provider(Config(provider="gemini", api_key="k"))
        assert provider.__class__.__name__ == "GeminiProvider"
        assert provider.model == "gemini-3-flash-preview"


def test_json_instruction_names_fields():
    text = json_instruction(TRANSLATION_SCHEMA)
    assert "'indonesianTranslation', 'wordType'" in text
