"""
Array notation variants.

A pitch class, a pitch and an interval are all written as short integer arrays. Plain
arrays are told apart by their length only, so the three shapes are given explicit tuple
types here. Being tuples, they index and unpack like the plain arrays they stand for.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Any, NamedTuple

from .errors import NoMatchError
from .utils.collection import isArray
from .utils.number import resolveInt

__all__ = [
    "PitchClass",
    "Pitch",
    "Interval",
    "Shape",
    "ShapeKind",
    "shapeOf",
]


class PitchClass(NamedTuple):
    """A pitch without octave, e.g. `C#` is `PitchClass(0, 1)`."""

    step: int
    acci: int


class Pitch(NamedTuple):
    """
    A pitch with octave, e.g. `C#4` is `Pitch(0, 1, 4, 0)`.

    `reserved` is always `0` when parsed and is not read when building.
    """

    step: int
    acci: int
    octave: int | None
    reserved: int = 0


class Interval(NamedTuple):
    """
    An interval or scale degree, e.g. `3M` is `Interval(2, 0, 0)`.

    A negative `octave` marks a descending interval. `octave` may be `None` when unknown, in
    which case the interval is read as a simple ascending one.
    """

    simple: int
    acci: int
    octave: int | None


type Shape = PitchClass | Pitch | Interval


class ShapeKind(StrEnum):
    PITCH_CLASS = "pc"
    PITCH = "p"
    INTERVAL = "i"


_kindByType = {
    PitchClass: ShapeKind.PITCH_CLASS,
    Pitch: ShapeKind.PITCH,
    Interval: ShapeKind.INTERVAL,
}


def shapeOf(arr: Any) -> ShapeKind | None:
    """
    Decides which codec builds `arr`. Tagged shapes are classified by type, plain arrays by
    length: 1 or 2 is a pitch class, 3 an interval, 4 or more a pitch. An empty array or a
    non-array has no shape.
    """
    if (kind := _kindByType.get(type(arr))) is not None:
        return kind
    if not isArray(arr):
        return None
    match len(arr):
        case 0:
            return None
        case 1 | 2:
            return ShapeKind.PITCH_CLASS
        case 3:
            return ShapeKind.INTERVAL
        case _:
            return ShapeKind.PITCH


def slot(arr: Sequence, idx: int, default: Any = None) -> Any:
    """
    Reads an integer slot of an array. Missing slots and `None` read as `default`; any other
    non-integral value is a no match.
    """
    if idx >= len(arr) or arr[idx] is None:
        return default
    try:
        return resolveInt(arr[idx])
    except ValueError:
        raise NoMatchError(arr, "array") from None


def readSlots(arr: Sequence) -> tuple[int | None, int | None, int | None]:
    """
    The step / simple number, alteration and octave slots of an array, resolved to `int` or
    `None`. These are the only slots a codec reads, so arrays with equal `readSlots` build to
    the same string.
    """
    return tuple(slot(arr, i) for i in range(3))
