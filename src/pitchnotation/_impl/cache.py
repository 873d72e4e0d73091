from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from threading import RLock
from typing import Any

import pyrsistent as pyr

__all__ = ["MemoCache", "buildKey"]

_MISSING = object()


class MemoCache[K: Hashable, V]:
    """
    Unbounded memo table. Entries are never evicted; `clear()` empties the table at once.

    Computing happens outside the lock. If two threads compute the same key, both results
    are equal and the later one is kept.
    """

    __slots__ = ("_data", "_lock")

    def __init__(self):
        self._data: dict[K, V] = {}
        self._lock = RLock()

    def lookup(self, key: K, compute: Callable[[], V]) -> V:
        """
        Returns the cached value of `key`, computing and storing it on first use. `None`
        results are cached as well.
        """
        with self._lock:
            value = self._data.get(key, _MISSING)
        if value is _MISSING:
            value = compute()
            with self._lock:
                self._data[key] = value
        return value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def snapshot(self) -> pyr.PMap[K, V]:
        """An immutable copy of the current content."""
        with self._lock:
            return pyr.pmap(self._data)

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<{len(self)} entries>)"


def buildKey(kind: str, arr: Sequence) -> str:
    """
    Cache key of an array to build: the shape kind followed by the first five slots, with
    missing and `None` slots left empty, e.g. `"pc|0|0|||"` for `[0, 0]`.
    """
    segments = [kind]
    for i in range(5):
        value = arr[i] if i < len(arr) else None
        segments.append("" if value is None else str(value))
    return "|".join(segments)
