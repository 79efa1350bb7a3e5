"""Internal helpers for chainbind.

Small functions used across modules. Not part of the public API."""

from __future__ import annotations

import typing
from collections.abc import Callable

def is_integral(n: object) -> typing.TypeGuard[int | float]:
    """
    True for whole numbers.

    Accepts ints and floats with no fractional part (8.0). Rejects bool,
    None, NaN, infinities and anything non-numeric.
    """
    if isinstance(n, bool):
        return False
    if isinstance(n, int):
        return True
    if isinstance(n, float):
        return n.is_integer()
    return False

def describe(fn: Callable[..., object]) -> str:
    """Readable name of a transform for log events."""
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)

__all__ = (
    "is_integral",
    "describe",
)
