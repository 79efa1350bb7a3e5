"""
Integer-domain transforms for the maybe kind.

Every transform is total: input outside the integers (3.14, None, "8",
True) or a division that is not exact gives Nothing instead of raising.
"""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from .._helpers import is_integral


def maybe_integer(n: object) -> Option[int]:
    """Wrap a whole number as Some(int), anything else as Nothing."""
    if not is_integral(n):
        return Nothing()
    return Some(int(n))


def add1(n: object) -> Option[int]:
    if not is_integral(n):
        return Nothing()
    return maybe_integer(int(n) + 1)


def multiply_by_2(n: object) -> Option[int]:
    if not is_integral(n):
        return Nothing()
    return maybe_integer(int(n) * 2)


def _divide_exact(n: object, divisor: int) -> Option[int]:
    if not is_integral(n):
        return Nothing()
    quotient, remainder = divmod(int(n), divisor)
    if remainder:
        return Nothing()
    return maybe_integer(quotient)


def divide_by_2(n: object) -> Option[int]:
    """Half of n, Nothing when n is odd."""
    return _divide_exact(n, 2)


def divide_by_3(n: object) -> Option[int]:
    """Third of n, Nothing when n is not a multiple of 3."""
    return _divide_exact(n, 3)


__all__ = (
    "maybe_integer",
    "add1",
    "multiply_by_2",
    "divide_by_2",
    "divide_by_3",
)
