from __future__ import annotations

from collections.abc import Sequence
from typing import Any
import re

from .constants import stepIndex, stepName
from .errors import NoMatchError
from .shapes import Pitch, PitchClass, slot
from .utils.collection import isArray

__all__ = ["parsePitch", "buildPitch"]

_pitchRe = re.compile(r"([a-gA-G])(#{1,4}|b{1,4}|x{1,2}|)(\d*)", re.ASCII)


def _parseAcci(src: str) -> int:
    # "x" is a double sharp
    acci = len(src.replace("x", "##"))
    if src[:1] == "b":
        acci = -acci
    return acci


def _parsePitch(src: Any) -> PitchClass | Pitch:
    if not isinstance(src, str) or (m := _pitchRe.fullmatch(src)) is None:
        raise NoMatchError(src, "pitch")
    letter, acciSrc, octaveSrc = m.groups()
    step = stepIndex(letter)
    acci = _parseAcci(acciSrc)
    if octaveSrc:
        return Pitch(step, acci, int(octaveSrc), 0)
    return PitchClass(step, acci)


def _buildPitch(arr: Sequence) -> str:
    if not isArray(arr) or len(arr) == 0:
        raise NoMatchError(arr, "pitch array")
    step = slot(arr, 0)
    if step is None:
        raise NoMatchError(arr, "pitch array")
    acci = slot(arr, 1, 0)
    octave = slot(arr, 2)
    acciStr = "#" * acci if acci >= 0 else "b" * -acci
    octaveStr = "" if octave is None else str(octave)
    return stepName(step) + acciStr + octaveStr


def parsePitch(src: str) -> PitchClass | Pitch | None:
    """
    Parses a pitch in scientific notation, returning `None` if the string is not a pitch.

    The letter is case-insensitive and may be followed by up to four sharps `#`, four flats
    `b` or two double sharps `x`, and then an optional octave number. Without octave a
    `PitchClass` is returned.

    ```python
    parsePitch("C#4")  # Pitch(step=0, acci=1, octave=4, reserved=0)
    parsePitch("fx")  # PitchClass(step=3, acci=2)
    ```
    """
    try:
        return _parsePitch(src)
    except NoMatchError:
        return None


def buildPitch(arr: Sequence) -> str | None:
    """
    Builds a pitch string from a pitch or pitch class array, returning `None` for a
    non-array or an empty array.

    Steps outside `0..6` wrap by `abs(step) % 7`. Octave `0` is written; a missing or `None`
    octave gives a pitch class.

    ```python
    buildPitch([2, -1, 3, 0])  # "Eb3"
    buildPitch([6, -2])  # "Bbb"
    ```
    """
    try:
        return _buildPitch(arr)
    except NoMatchError:
        return None
