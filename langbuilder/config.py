"""Application configuration, resolved once at startup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv


PROVIDERS = ("gemini", "anthropic", "openai")

ENV_KEYS = {
    "gemini": "GEMINI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}

DEFAULT_MODELS = {
    "gemini": "gemini-3-flash-preview",
    "anthropic": "claude-3-haiku-20240307",
    "openai": "gpt-4o-mini",
}

CONFIG_PATHS = [
    "config.yaml",
    os.path.expanduser("~/.config/langbuilder/config.yaml"),
]


@dataclass(frozen=True)
class Config:
    """Resolved settings passed explicitly to the services that need them."""
    data_dir: Path = Path("data")
    provider: str = "gemini"
    api_key: Optional[str] = None
    model: str = DEFAULT_MODELS["gemini"]
    speech_lang: str = "id"
    log_file: Optional[str] = "langbuilder.log"
    log_level: str = "INFO"

    @property
    def ai_enabled(self) -> bool:
        """Whether AI-backed actions can run at all."""
        return bool(self.api_key)

    @property
    def key_name(self) -> str:
        """Environment variable that holds the key for the provider."""
        return ENV_KEYS.get(self.provider, "GEMINI_API_KEY")


def _is_placeholder(value) -> bool:
    return isinstance(value, str) and value.startswith("your-") and value.endswith("-here")


def _usable_key(value) -> Optional[str]:
    """A configured key, or None when it is empty, not text or a placeholder."""
    if not isinstance(value, str) or not value.strip() or _is_placeholder(value):
        return None
    return value


def read_config_file(config_path: Optional[str] = None) -> dict:
    """Load the first YAML config file found, or an empty dict."""
    for path in [config_path, *CONFIG_PATHS]:
        if path and os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
    return {}


def build_config(
    raw: dict,
    environ: Optional[dict] = None,
    data_dir: Optional[str] = None,
    provider: Optional[str] = None,
) -> Config:
    """Merge a raw config mapping with environment variables.

    Args:
        raw: Parsed YAML content
        environ: Environment mapping (defaults to os.environ)
        data_dir: Command line override for the data directory
        provider: Command line override for the AI provider

    Returns:
        A frozen Config
    """
    environ = os.environ if environ is None else environ

    data_config = raw.get("data", {}) or {}
    ai_config = raw.get("ai", {}) or {}
    speech_config = raw.get("speech", {}) or {}
    logging_config = raw.get("logging", {}) or {}

    name = provider or ai_config.get("default_provider") or "gemini"
    if name not in PROVIDERS:
        raise ValueError(f"Unknown AI provider: {name}")

    provider_config = ai_config.get(name, {}) or {}
    api_key = _usable_key(provider_config.get("api_key"))
    if api_key is None:
        api_key = _usable_key(environ.get(ENV_KEYS[name]))

    return Config(
        data_dir=Path(data_dir or data_config.get("base_path", "data")),
        provider=name,
        api_key=api_key,
        model=provider_config.get("model", DEFAULT_MODELS[name]),
        speech_lang=speech_config.get("lang", "id"),
        log_file=logging_config.get("file", "langbuilder.log"),
        log_level=str(logging_config.get("level", "INFO")).upper(),
    )


def load_config(
    config_path: Optional[str] = None,
    data_dir: Optional[str] = None,
    provider: Optional[str] = None,
) -> Config:
    """Read .env, the YAML file and the environment into a Config."""
    load_dotenv()
    return build_config(
        read_config_file(config_path),
        data_dir=data_dir,
        provider=provider,
    )


def configure_logging(config: Config) -> None:
    """Send log records to a file; the terminal belongs to the UI."""
    root = logging.getLogger("langbuilder")
    root.setLevel(getattr(logging, config.log_level, logging.INFO))

    if not config.log_file:
        root.addHandler(logging.NullHandler())
        return

    handler = logging.FileHandler(config.log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s"
    ))
    root.addHandler(handler)
