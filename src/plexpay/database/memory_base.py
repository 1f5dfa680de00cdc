from __future__ import annotations

from typing import Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class MemoryTable(Generic[T]):
    """Dict-backed table with auto-increment ids.

    Note: Used by the in-memory repositories (tests, demos). Not thread-safe.
    """

    def __init__(self) -> None:
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def insert(self, build: Callable[[int], T]) -> T:
        row_id = self._next_id
        self._next_id += 1
        row = build(row_id)
        self._rows[row_id] = row
        return row

    def get(self, row_id: int) -> Optional[T]:
        return self._rows.get(int(row_id))

    def all(self) -> List[T]:
        return list(self._rows.values())

    def replace(self, row_id: int, row: T) -> bool:
        if int(row_id) not in self._rows:
            return False
        self._rows[int(row_id)] = row
        return True

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(int(row_id), None) is not None

    def __len__(self) -> int:
        return len(self._rows)
