from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")
Predicate = Callable[[T], bool]


class InMemoryTable(Generic[T]):
    """Ordered, copy-on-write collection of immutable rows.

    Every mutation builds a new tuple and swaps it in with a single
    assignment, so a reader holding ``rows()`` never sees a half-applied
    change. Rows keep insertion order; replacing a row keeps its position.
    """

    def __init__(self, rows: Iterable[T] = ()):
        self._rows: Tuple[T, ...] = tuple(rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(self._rows)

    def rows(self) -> Tuple[T, ...]:
        return self._rows

    def find(self, predicate: Predicate) -> Optional[T]:
        for row in self._rows:
            if predicate(row):
                return row
        return None

    def filter(self, predicate: Predicate) -> Tuple[T, ...]:
        return tuple(row for row in self._rows if predicate(row))

    def append(self, row: T) -> None:
        self._rows = self._rows + (row,)

    def replace_first(self, predicate: Predicate, row: T) -> bool:
        for i, current in enumerate(self._rows):
            if predicate(current):
                self._rows = self._rows[:i] + (row,) + self._rows[i + 1:]
                return True
        return False

    def upsert(self, predicate: Predicate, row: T) -> bool:
        """Replace the first match in place, else append.

        Returns True when a new row was inserted.
        """

        if self.replace_first(predicate, row):
            return False
        self.append(row)
        return True

    def remove_where(self, predicate: Predicate) -> bool:
        kept = tuple(row for row in self._rows if not predicate(row))
        if len(kept) == len(self._rows):
            return False
        self._rows = kept
        return True
