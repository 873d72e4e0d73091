from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from bidict import bidict
import pyrsistent as pyr

from .utils.collection import cycGet, readonlyArray

__all__ = [
    "STEP_NAMES",
    "INTERVAL_TYPES",
    "PERFECTABLE_STEPS",
    "IntervalType",
    "QUALITY_LADDERS",
    "stepName",
    "stepIndex",
    "intervalType",
]

STEP_NAMES: Sequence[str] = readonlyArray(list("CDEFGAB"))
"""step names from C to B"""

_stepNamesInvMap = pyr.pmap({str(name): i for i, name in enumerate(STEP_NAMES)})

PERFECTABLE_STEPS = frozenset((0, 3, 4))
"""Collection of interval step values that can have quality "perfect"."""


class IntervalType(StrEnum):
    """
    Inherent type of a simple interval number, which decides the name of its unaltered
    quality.
    """

    PERFECT = P = "P"
    """Unisons, fourths, fifths."""

    MAJOR = M = "M"
    """Seconds, thirds, sixths, sevenths."""


INTERVAL_TYPES: Sequence[str] = readonlyArray(
    [IntervalType.P if i in PERFECTABLE_STEPS else IntervalType.M for i in range(7)]
)
"""
Interval type of each simple interval step.

*Value*: `np.array(["P", "M", "M", "P", "P", "M", "M"])`
"""

QUALITY_LADDERS: pyr.PMap[IntervalType, bidict[str, int]] = pyr.pmap(
    {
        IntervalType.PERFECT: bidict(
            (
                ("dddd", -4),
                ("ddd", -3),
                ("dd", -2),
                ("d", -1),  # diminished
                ("P", 0),  # perfect
                ("A", 1),  # augmented
                ("AA", 2),
                ("AAA", 3),
                ("AAAA", 4),
            )
        ),
        IntervalType.MAJOR: bidict(
            (
                ("ddd", -4),
                ("dd", -3),
                ("d", -2),  # diminished
                ("m", -1),  # minor
                ("M", 0),  # major
                ("A", 1),  # augmented
                ("AA", 2),
                ("AAA", 3),
                ("AAAA", 4),
            )
        ),
    }
)
"""
Mapping from named interval quality to the alteration from the natural quality of each
interval type. Look up `.inv` for the reverse direction.
"""


def stepIndex(name: str) -> int:
    """Index of a step letter (case-insensitive) from C = 0 to B = 6."""
    return _stepNamesInvMap[name.upper()]


def intervalType(simple: int) -> IntervalType:
    return IntervalType(cycGet(INTERVAL_TYPES, abs(simple)))


def stepName(step: int) -> str:
    """Letter name of a step. Negative and out-of-range steps wrap by `abs(step) % 7`."""
    return str(cycGet(STEP_NAMES, abs(step)))
