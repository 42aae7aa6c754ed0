"""Application state and the actions the view can trigger."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from langbuilder.ai.gateway import AIGateway
from langbuilder.config import Config
from langbuilder.core.models import GeneratedSentence, Sentence, Translation, Word
from langbuilder.core.sentences import SentenceStore
from langbuilder.core.tts import TextToSpeech, TTSError
from langbuilder.core.vocabulary import VocabularyStore
from langbuilder.errors import (
    BusyError,
    ConfigurationError,
    GatewayError,
    LangBuilderError,
    ValidationError,
)
from langbuilder.storage.persistence import Persistence


logger = logging.getLogger(__name__)

MIN_SENTENCE_WORDS = 2

SENTENCE_FAILED = "Failed to generate sentence. Please try again."


@dataclass
class PendingRequest:
    """An AI call that has been admitted but not yet applied.

    ``run`` touches no session state and may execute on a worker thread.
    """
    token: int
    kind: str
    call: Callable[[], Any]
    on_success: Callable[[Any], None]
    failure_message: Optional[str] = None
    words: list[Word] = field(default_factory=list)

    def run(self) -> Any:
        return self.call()


class Session:
    """Owns the stores, the busy flag and the current error message."""

    def __init__(
        self,
        config: Config,
        persistence: Persistence,
        gateway: Optional[AIGateway] = None,
        speech: Optional[TextToSpeech] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.persistence = persistence
        self.gateway = gateway
        self.speech = speech
        self.rng = rng or random.Random()

        words, sentences = persistence.load()
        self.vocabulary = VocabularyStore(words, on_change=self._save_words)
        self.sentence_store = SentenceStore(sentences, on_change=self._save_sentences)

        self.busy = False
        self.error: Optional[str] = None
        self._latest_token = 0

    @property
    def ai_enabled(self) -> bool:
        return self.gateway is not None

    @property
    def words(self) -> list[Word]:
        return self.vocabulary.words

    @property
    def sentences(self) -> list[Sentence]:
        return self.sentence_store.sentences

    def clear_error(self) -> None:
        self.error = None

    # Persistence

    def _save_words(self, words: list[Word]) -> None:
        try:
            self.persistence.save_words(words)
        except OSError as e:
            logger.error("Could not save words: %s", e)
            self.error = f"Could not save words: {e}"

    def _save_sentences(self, sentences: list[Sentence]) -> None:
        try:
            self.persistence.save_sentences(sentences)
        except OSError as e:
            logger.error("Could not save sentences: %s", e)
            self.error = f"Could not save sentences: {e}"

    # Request lifecycle

    def _require_ai(self) -> AIGateway:
        if self.gateway is None:
            raise ConfigurationError(
                f"API Key is missing. Please configure {self.config.key_name}."
            )
        return self.gateway

    def _admit(self) -> int:
        if self.busy:
            raise BusyError("Another request is still running. Please wait.")
        self.busy = True
        self.error = None
        self._latest_token += 1
        return self._latest_token

    def begin_save_word(self, text: str) -> Optional[PendingRequest]:
        """Admit a translation request for the given Myanmar text.

        Returns None when there is nothing to do or the request was refused;
        a refusal leaves its reason in ``error``.
        """
        source = text.strip()
        if not source:
            return None

        try:
            gateway = self._require_ai()
            token = self._admit()
        except LangBuilderError as e:
            self.error = str(e)
            return None

        def on_success(translation: Translation) -> None:
            self.vocabulary.add(Word.create(
                myanmar=source,
                indonesian=translation.indonesian,
                type=translation.word_type,
            ))

        return PendingRequest(
            token=token,
            kind="translate",
            call=lambda: gateway.translate(source),
            on_success=on_success,
        )

    def begin_generate_sentence(self) -> Optional[PendingRequest]:
        """Admit a sentence request built from a random subset of words."""
        try:
            gateway = self._require_ai()
            if len(self.vocabulary) < MIN_SENTENCE_WORDS:
                raise ValidationError(
                    "Please add at least two words to generate a sentence."
                )
            token = self._admit()
        except LangBuilderError as e:
            self.error = str(e)
            return None

        selected = gateway.pick_words(self.vocabulary.words, self.rng)

        def on_success(generated: GeneratedSentence) -> None:
            self.sentence_store.add(Sentence.create(
                myanmar=generated.myanmar,
                indonesian=generated.indonesian,
            ))

        return PendingRequest(
            token=token,
            kind="sentence",
            call=lambda: gateway.generate_sentence(selected),
            on_success=on_success,
            failure_message=SENTENCE_FAILED,
            words=selected,
        )

    def complete(
        self,
        pending: PendingRequest,
        result: Any = None,
        error: Optional[BaseException] = None,
    ) -> bool:
        """Apply a finished request. Returns False if it was discarded.

        Only the most recently admitted request may change state; anything
        older is a stale response and is dropped.
        """
        if pending.token != self._latest_token:
            logger.warning("Discarding stale %s response (token %d, latest %d)",
                           pending.kind, pending.token, self._latest_token)
            return False

        self.busy = False

        if error is not None:
            logger.error("%s request failed: %s", pending.kind, error)
            self.error = pending.failure_message or str(error)
            return True

        pending.on_success(result)
        return True

    def _run_now(self, pending: Optional[PendingRequest]) -> None:
        if pending is None:
            return
        try:
            result = pending.run()
        except GatewayError as e:
            self.complete(pending, error=e)
        else:
            self.complete(pending, result=result)

    def save_word(self, text: str) -> None:
        """Translate and store a word in one blocking call."""
        self._run_now(self.begin_save_word(text))

    def generate_sentence(self) -> None:
        """Generate and store a sentence in one blocking call."""
        self._run_now(self.begin_generate_sentence())

    # Plain store actions

    def delete_word(self, id: str) -> None:
        self.vocabulary.remove(id)

    def delete_sentence(self, id: str) -> None:
        self.sentence_store.remove(id)

    def search(self, term: str) -> list[Word]:
        return self.vocabulary.search(term)

    def speak(self, text: str) -> None:
        """Voice target-language text, reporting unsupported speech as an error."""
        if self.speech is None:
            self.error = "Text-to-speech not supported."
            return
        try:
            self.speech.speak(text)
        except TTSError as e:
            self.error = str(e)
