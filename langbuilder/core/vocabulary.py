"""The learner's word bank."""

from langbuilder.core.collection import RecordStore
from langbuilder.core.models import Word


class VocabularyStore(RecordStore[Word]):
    """Word bank with search over both text fields."""

    @property
    def words(self) -> list[Word]:
        return self.items

    def search(self, term: str) -> list[Word]:
        """Case-insensitive substring match on the Myanmar or Indonesian text."""
        needle = term.lower()
        return [
            w for w in self._items
            if needle in w.myanmar.lower() or needle in w.indonesian.lower()
        ]
