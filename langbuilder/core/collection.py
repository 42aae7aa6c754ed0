"""Newest-first in-memory record collections."""

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from langbuilder.core.models import Sentence, Word


T = TypeVar("T", Word, Sentence)


class RecordStore(Generic[T]):
    """Ordered list of records, newest first.

    Every mutation hands the full post-mutation list to ``on_change``.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        on_change: Optional[Callable[[list[T]], None]] = None,
    ):
        self._items: list[T] = list(items)
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change:
            self._on_change(list(self._items))

    @property
    def items(self) -> list[T]:
        """Snapshot of the records in display order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def get(self, id: str) -> Optional[T]:
        """Get a record by ID."""
        for item in self._items:
            if item.id == id:
                return item
        return None

    def add(self, item: T) -> None:
        """Prepend a record."""
        self._items = [item, *self._items]
        self._changed()

    def remove(self, id: str) -> bool:
        """Drop records with this ID, keeping the order of the rest."""
        kept = [item for item in self._items if item.id != id]
        removed = len(kept) != len(self._items)
        self._items = kept
        self._changed()
        return removed
