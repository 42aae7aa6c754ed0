"""Generated example sentences."""

from langbuilder.core.collection import RecordStore
from langbuilder.core.models import Sentence


class SentenceStore(RecordStore[Sentence]):
    """Sentences produced by the AI, newest first."""

    @property
    def sentences(self) -> list[Sentence]:
        return self.items
