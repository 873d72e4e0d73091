from __future__ import annotations

from collections.abc import Sequence
import typing as t

import numpy as np

if t.TYPE_CHECKING:
    from typing import overload

    @overload
    def cycGet[T](seq: Sequence[T], idx: int) -> T: ...

    @overload
    def cycGet[T](seq: Sequence[T], idx: int, increment: T) -> T: ...


__all__ = ["cycGet", "isArray", "readonlyArray"]


def cycGet(seq, idx, increment=None):
    q, r = divmod(idx, len(seq))
    res = seq[r]
    if increment is not None:
        res += increment * q
    return res


def isArray(obj: t.Any) -> bool:
    """
    Whether `obj` can be read as an array notation. Strings and bytes are sequences too, but
    never arrays.
    """
    if isinstance(obj, (str, bytes, bytearray)):
        return False
    if isinstance(obj, np.ndarray):
        return obj.ndim == 1
    return isinstance(obj, Sequence)


def readonlyArray[T](items: Sequence[T]) -> np.ndarray:
    """Creates a `numpy` array that cannot be written to."""
    arr = np.array(items)
    arr.flags.writeable = False
    return arr
