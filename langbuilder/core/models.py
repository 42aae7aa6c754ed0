"""Data models for the vocabulary builder."""

from dataclasses import dataclass
import time
from typing import Optional


_last_id = 0


def new_id() -> str:
    """Time-based record id, strictly increasing within the process.

    Ids loaded from storage are not checked for collisions.
    """
    global _last_id
    _last_id = max(time.time_ns(), _last_id + 1)
    return str(_last_id)


def _text(data: dict, key: str, default: Optional[str] = None) -> str:
    value = data[key] if default is None else data.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Word:
    """A word bank entry with its translation and category."""
    id: str
    myanmar: str
    indonesian: str
    type: str

    @classmethod
    def create(cls, myanmar: str, indonesian: str, type: str) -> "Word":
        """Create a new word with a fresh ID."""
        return cls(id=new_id(), myanmar=myanmar, indonesian=indonesian, type=type)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "myanmar": self.myanmar,
            "indonesian": self.indonesian,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Word":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            myanmar=_text(data, "myanmar"),
            indonesian=_text(data, "indonesian"),
            type=_text(data, "type", ""),
        )


@dataclass(frozen=True)
class Sentence:
    """An AI-generated example sentence pair."""
    id: str
    myanmar: str
    indonesian: str

    @classmethod
    def create(cls, myanmar: str, indonesian: str) -> "Sentence":
        """Create a new sentence with a fresh ID."""
        return cls(id=new_id(), myanmar=myanmar, indonesian=indonesian)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "myanmar": self.myanmar,
            "indonesian": self.indonesian,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Sentence":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            myanmar=_text(data, "myanmar"),
            indonesian=_text(data, "indonesian"),
        )


@dataclass(frozen=True)
class Translation:
    """Parsed translation reply."""
    indonesian: str
    word_type: str


@dataclass(frozen=True)
class GeneratedSentence:
    """Parsed sentence reply."""
    myanmar: str
    indonesian: str
