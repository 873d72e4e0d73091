from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .cache import MemoCache, buildKey
from .errors import NoMatchError
from .interval import buildInterval, parseInterval
from .pitch import buildPitch, parsePitch
from .shapes import Shape, ShapeKind, readSlots, shapeOf
from .utils.collection import isArray

__all__ = [
    "Grammar",
    "Notation",
    "DEFAULT_GRAMMARS",
    "defaultNotation",
    "convert",
    "toArr",
    "toStr",
    "clearCache",
]

type Grammar = Callable[[str], Shape | None]
"""A parser that returns an array notation, or `None` when the string does not match."""

DEFAULT_GRAMMARS: tuple[Grammar, ...] = (parsePitch, parseInterval)
"""Pitches are tried before intervals, so `"b2"` is the pitch B2 rather than a degree."""

_builders: dict[ShapeKind, Callable[[Sequence], str | None]] = {
    ShapeKind.PITCH_CLASS: buildPitch,
    ShapeKind.PITCH: buildPitch,
    ShapeKind.INTERVAL: buildInterval,
}


class Notation:
    """
    Converts between pitch / interval strings and array notation.

    Parsing tries each grammar in order and keeps the first match. Building selects the
    codec by the shape of the array. Results are memoized in two caches, one per direction,
    unless `cached=False` is passed. Caches can be injected to share them between
    instances.

    ```python
    n = Notation()
    n.arr("C#4")  # Pitch(step=0, acci=1, octave=4, reserved=0)
    n.str([2, 0, 1])  # "10M"
    n.convert("3M")  # Interval(simple=2, acci=0, octave=0)
    ```
    """

    __slots__ = ("_grammars", "_parseCache", "_buildCache", "_cached")

    def __init__(
        self,
        grammars: Iterable[Grammar] = DEFAULT_GRAMMARS,
        *,
        cached: bool = True,
        parseCache: MemoCache[str, Shape | None] | None = None,
        buildCache: MemoCache[str, str | None] | None = None,
    ):
        self._grammars = tuple(grammars)
        if not self._grammars:
            raise ValueError("At least one grammar is required.")
        self._cached = cached
        self._parseCache = MemoCache() if parseCache is None else parseCache
        self._buildCache = MemoCache() if buildCache is None else buildCache

    @property
    def grammars(self) -> tuple[Grammar, ...]:
        return self._grammars

    @property
    def cached(self) -> bool:
        return self._cached

    @property
    def parseCache(self) -> MemoCache[str, Shape | None]:
        return self._parseCache

    @property
    def buildCache(self) -> MemoCache[str, str | None]:
        return self._buildCache

    def _parse(self, src: str) -> Shape | None:
        for grammar in self._grammars:
            if (result := grammar(src)) is not None:
                return result
        return None

    def _build(self, kind: ShapeKind, arr: Sequence) -> str | None:
        return _builders[kind](arr)

    def arr(self, src: str | Sequence, *, strict: bool = False) -> Shape | Sequence | None:
        """
        Parses a string into array notation. An array is returned unchanged, so already
        parsed values can be passed through again.
        """
        if isArray(src):
            return src
        if not isinstance(src, str):
            result = None
        elif self._cached:
            result = self._parseCache.lookup(src, lambda: self._parse(src))
        else:
            result = self._parse(src)
        if result is None and strict:
            raise NoMatchError(src)
        return result

    def str(self, arr: Sequence, *, strict: bool = False) -> str | None:
        """
        Builds the string of an array notation. Tagged shapes go to their own codec; plain
        arrays of length 1 or 2 are pitch classes, 3 intervals, 4 or more pitches. An empty
        array or a non-array gives `None`.
        """
        kind = shapeOf(arr)
        if kind is None:
            result = None
        elif self._cached:
            try:
                key = buildKey(kind, readSlots(arr))
            except NoMatchError:  # unreadable slots are never cached
                result = None
            else:
                result = self._buildCache.lookup(key, lambda: self._build(kind, arr))
        else:
            result = self._build(kind, arr)
        if result is None and strict:
            raise NoMatchError(arr, "pitch or interval array")
        return result

    def convert(
        self, value: str | Sequence, *, strict: bool = False
    ) -> Shape | str | None:
        """Parses a string or builds an array, whichever `value` is."""
        if isinstance(value, str):
            return self.arr(value, strict=strict)
        if isArray(value):
            return self.str(value, strict=strict)
        if strict:
            raise NoMatchError(value)
        return None

    def clear(self) -> None:
        """Empties both caches."""
        self._parseCache.clear()
        self._buildCache.clear()

    def __repr__(self) -> str:
        names = ", ".join(getattr(g, "__name__", repr(g)) for g in self._grammars)
        return f"{self.__class__.__name__}([{names}], cached={self._cached})"

    def __call__(self, value: str | Sequence) -> Shape | str | None:
        return self.convert(value)


defaultNotation = Notation()
"""Process-wide default converter."""

convert = defaultNotation.convert
toArr = defaultNotation.arr
toStr = defaultNotation.str
clearCache = defaultNotation.clear
