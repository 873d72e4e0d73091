from __future__ import annotations

from collections.abc import Sequence
from typing import Any
import re

from .constants import QUALITY_LADDERS, IntervalType, intervalType
from .errors import NoMatchError
from .shapes import Interval, slot
from .utils.collection import isArray
from .utils.number import sgn

__all__ = ["parseInterval", "buildInterval", "intervalNumber"]

_intervalRe = re.compile(
    r"([-+]?)(\d+)(d{1,4}|m|M|P|A{1,4}|b{1,4}|#{1,4}|)", re.ASCII
)


def _invertAcci(acci: int, itype: IntervalType) -> int:
    """
    Alteration of an interval measured from the other side of its inversion. The mapping is
    its own inverse.
    """
    if itype == IntervalType.PERFECT:
        return -acci
    else:
        return -(acci + 1)


def _parseQual(src: str, itype: IntervalType) -> int:
    if not src:  # bare number or degree
        return 0
    # scale degree shorthand counts sharps and flats directly
    if src[0] == "#":
        return len(src)
    if src[0] == "b":
        return -len(src)
    acci = QUALITY_LADDERS[itype].get(src)
    if acci is None:
        raise ValueError(f"Invalid interval quality for {itype.name} type: {src}")
    return acci


def _parseInterval(src: Any) -> Interval:
    if not isinstance(src, str) or (m := _intervalRe.fullmatch(src)) is None:
        raise NoMatchError(src, "interval")
    signSrc, numSrc, qualSrc = m.groups()
    direction = -1 if signSrc == "-" else 1
    num = int(numSrc) - 1

    octave, simple = divmod(num, 7)
    octave *= direction
    itype = intervalType(simple)
    try:
        acci = _parseQual(qualSrc, itype)
    except ValueError:
        raise NoMatchError(src, "interval") from None

    # descending intervals are stored as their inversion an octave lower
    if direction < 0:
        acci = _invertAcci(acci, itype)
        if simple != 0:
            simple = 7 - simple
            octave -= 1
    return Interval(simple, acci, octave)


def intervalNumber(simple: int, octave: int | None) -> int:
    """
    Signed interval number (`1` for unison, `-2` for a descending second, ...) of the array
    notation `[simple, *, octave]`.
    """
    simple = simple % 7 + 1
    if octave is None:
        return simple
    direction = sgn(octave)
    octave = abs(octave)
    if direction < 0:
        simple = 9 - simple
        octave -= 1
    return direction * (simple + 7 * octave)


def _buildInterval(arr: Sequence) -> str:
    if not isArray(arr) or len(arr) == 0:
        raise NoMatchError(arr, "interval array")
    simple = slot(arr, 0)
    if simple is None:
        raise NoMatchError(arr, "interval array")
    acci = slot(arr, 1, 0)
    octave = slot(arr, 2)

    itype = intervalType(simple)
    num = intervalNumber(simple, octave)
    if num < 0:
        acci = _invertAcci(acci, itype)
    qual = QUALITY_LADDERS[itype].inv.get(acci)
    if qual is None:  # beyond quadruply augmented or diminished
        raise NoMatchError(arr, "interval array")
    return f"{num}{qual}"


def parseInterval(src: str) -> Interval | None:
    """
    Parses an interval (`"3M"`, `"-9m"`, `"11dddd"`) or a scale degree (`"2b"`, `"4#"`,
    `"5"`) string. Returns `None` if the string matches neither, or if the quality does not
    exist for the interval number (`"1M"`, `"3P"`).

    Descending intervals are stored as the ascending inversion one octave lower, so the
    octave field is negative:

    ```python
    parseInterval("3M")  # Interval(simple=2, acci=0, octave=0)
    parseInterval("-2M")  # Interval(simple=6, acci=-1, octave=-1)
    ```
    """
    try:
        return _parseInterval(src)
    except NoMatchError:
        return None


def buildInterval(arr: Sequence) -> str | None:
    """
    Builds an interval string from an interval array. Scale degrees are always written with
    named qualities, e.g. `"2b"` comes back as `"2m"`. Returns `None` for a non-array or
    when the alteration is beyond four augmented or diminished steps.
    """
    try:
        return _buildInterval(arr)
    except NoMatchError:
        return None
