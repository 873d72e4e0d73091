from numbers import Integral, Real
from typing import Literal

__all__ = ["resolveInt", "sgn"]


def resolveInt(arg: Real) -> int:
    """
    Turns an integral numeric value (`int`, `numpy` integer, or a float such as `4.0`) into
    a plain `int`. Raises `ValueError` for anything else, including `bool`, which is an
    `Integral` in Python but never a valid step or alteration.
    """
    if isinstance(arg, bool):
        raise ValueError(f"Expected an integer, got {arg!r}")
    if isinstance(arg, Integral):
        return int(arg)
    if isinstance(arg, Real) and float(arg).is_integer():
        return int(arg)
    raise ValueError(f"Expected an integer, got {arg!r}")


def sgn(n: Real) -> Literal[-1, 1]:
    """
    Direction of a number, counting zero as ascending.
    """
    return -1 if n < 0 else 1
