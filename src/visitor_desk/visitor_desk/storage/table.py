from __future__ import annotations

from typing import Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Table(Generic[T]):
    """In-memory keyed collection of frozen records.

    Ids start at 1, grow monotonically and are never reused. Records are
    never mutated in place: updates store a new value under the same id.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def insert(self, build: Callable[[int], T]) -> T:
        row_id = self._next_id
        self._next_id += 1
        record = build(row_id)
        self._rows[row_id] = record
        return record

    def get(self, row_id: int) -> Optional[T]:
        return self._rows.get(row_id)

    def replace(self, row_id: int, record: T) -> T:
        if row_id not in self._rows:
            raise KeyError(f"{self.name}: no row with id {row_id}")
        self._rows[row_id] = record
        return record

    def all(self) -> List[T]:
        return list(self._rows.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for record in self._rows.values():
            if predicate(record):
                return record
        return None

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [r for r in self._rows.values() if predicate(r)]

    def __len__(self) -> int:
        return len(self._rows)
