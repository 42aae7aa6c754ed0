"""Snapshot the word and sentence collections to local storage."""

import json
import logging
from typing import Callable, TypeVar

from langbuilder.core.models import Sentence, Word
from langbuilder.storage.local import LocalStorage


logger = logging.getLogger(__name__)

T = TypeVar("T", Word, Sentence)

WORDS_KEY = "words"
SENTENCES_KEY = "sentences"


class Persistence:
    """Reads and writes the two named entries as JSON arrays."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def load(self) -> tuple[list[Word], list[Sentence]]:
        """Load both collections. Missing or malformed entries load empty."""
        words = self._load_entry(WORDS_KEY, Word.from_dict)
        sentences = self._load_entry(SENTENCES_KEY, Sentence.from_dict)
        return words, sentences

    def save_words(self, words: list[Word]) -> None:
        """Overwrite the word snapshot."""
        self._save_entry(WORDS_KEY, words)

    def save_sentences(self, sentences: list[Sentence]) -> None:
        """Overwrite the sentence snapshot."""
        self._save_entry(SENTENCES_KEY, sentences)

    def _save_entry(self, key: str, items: list[T]) -> None:
        payload = json.dumps([item.to_dict() for item in items], ensure_ascii=False)
        self.storage.set_item(key, payload)
        logger.debug("Saved %d records to %r", len(items), key)

    def _load_entry(self, key: str, from_dict: Callable[[dict], T]) -> list[T]:
        raw = self.storage.get_item(key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Discarding malformed %r entry: %s", key, e)
            return []

        if not isinstance(data, list):
            logger.warning("Discarding %r entry: expected a list, got %s",
                           key, type(data).__name__)
            return []

        items = []
        for record in data:
            try:
                items.append(from_dict(record))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning("Skipping bad record in %r: %r (%s)", key, record, e)
        return items
