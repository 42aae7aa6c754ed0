"""Tests for configuration loading."""

import shutil
import tempfile
from pathlib import Path

import pytest

from langbuilder.config import Config, build_config, read_config_file


class TestBuildConfig:
    """Test merging YAML settings with the environment."""

    def test_defaults(self):
        config = build_config({}, environ={})
        assert config.provider == "gemini"
        assert config.model == "gemini-3-flash-preview"
        assert config.data_dir == Path("data")
        assert config.speech_lang == "id"
        assert config.ai_enabled is False

    def test_key_from_environment(self):
        config = build_config({}, environ={"GEMINI_API_KEY": "secret"})
        assert config.api_key == "secret"
        assert config.ai_enabled is True

    def test_yaml_key_wins(self):
        raw = {"ai": {"gemini": {"api_key": "from-yaml"}}}
        config = build_config(raw, environ={"GEMINI_API_KEY": "from-env"})
        assert config.api_key == "from-yaml"

    def test_placeholder_is_ignored(self):
        raw = {"ai": {"gemini": {"api_key": "your-gemini-api-key-here"}}}
        config = build_config(raw, environ={})
        assert config.ai_enabled is False

    def test_placeholder_falls_back_to_environment(self):
        raw = {"ai": {"gemini": {"api_key": "your-gemini-api-key-here"}}}
        config = build_config(raw, environ={"GEMINI_API_KEY": "from-env"})
        assert config.api_key == "from-env"
        assert config.ai_enabled is True

    def test_placeholder_in_environment_is_ignored(self):
        config = build_config({}, environ={"GEMINI_API_KEY": "your-gemini-api-key-here"})
        assert config.api_key is None

    def test_non_string_key_is_ignored(self):
        raw = {"ai": {"gemini": {"api_key": 12345}}}
        assert build_config(raw, environ={}).ai_enabled is False
        config = build_config(raw, environ={"GEMINI_API_KEY": "from-env"})
        assert config.api_key == "from-env"

    def test_other_provider(self):
        raw = {"ai": {"default_provider": "openai", "openai": {"model": "gpt-x"}}}
        config = build_config(raw, environ={"OPENAI_API_KEY": "k", "GEMINI_API_KEY": "g"})
        assert config.provider == "openai"
        assert config.api_key == "k"
        assert config.model == "gpt-x"
        assert config.key_name == "OPENAI_API_KEY"

    def test_overrides(self):
        config = build_config(
            {"data": {"base_path": "elsewhere"}},
            environ={"ANTHROPIC_API_KEY": "a"},
            data_dir="cli-dir",
            provider="anthropic",
        )
        assert config.data_dir == Path("cli-dir")
        assert config.provider == "anthropic"
        assert config.api_key == "a"

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            build_config({"ai": {"default_provider": "mystery"}}, environ={})

    def test_logging_section(self):
        config = build_config({"logging": {"file": None, "level": "debug"}}, environ={})
        assert config.log_file is None
        assert config.log_level == "DEBUG"

    def test_config_is_frozen(self):
        config = Config()
        with pytest.raises(AttributeError):
            config.api_key = "x"


class TestReadConfigFile:
    """Test YAML file discovery."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_explicit_path(self):
        path = Path(self.temp_dir) / "config.yaml"
        path.write_text("data:\n  base_path: mydata\n", encoding="utf-8")
        assert read_config_file(str(path)) == {"data": {"base_path": "mydata"}}

    def test_empty_file(self, monkeypatch):
        monkeypatch.chdir(self.temp_dir)
        path = Path(self.temp_dir) / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert read_config_file(str(path)) == {}
