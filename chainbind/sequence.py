"""
Sequence kind
=============

List monad: a transform maps one value to a list of values, bind
flattens the per-element lists one level into a fresh list.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ._errors import KindMismatchError
from .kind import Kind, bind_chainM, register_kind


def unit_seq[T](value: T) -> list[T]:
    """Wrap a value into a one-element list."""
    return [value]


def flatten[T](nested: Iterable[list[T]]) -> list[T]:
    """
    Concatenate nested lists one level deep, in order.

    Example:
        flatten([[1, 2], [], [3]])  # [1, 2, 3]
    """
    out: list[T] = []
    for chunk in nested:
        if not isinstance(chunk, list):
            raise KindMismatchError(SEQUENCE.name, chunk)
        out.extend(chunk)
    return out


def bind_seq[T, U](items: Iterable[T], fn: Callable[[T], list[U]]) -> list[U]:
    """
    Apply `fn` to every element and flatten the results.

    Order and duplicates are preserved; an empty input gives an empty list
    without calling `fn`.
    """
    return flatten(fn(item) for item in items)


def bind_chain_seq[T](items: list[T], *fns: Callable[[T], list[T]]) -> list[T]:
    """Chain bind for lists. Empty lists flow through, no short-circuit."""
    return bind_chainM(items, *fns, kind=SEQUENCE)


SEQUENCE: Kind[list[object], object] = register_kind(
    Kind(
        name="sequence",
        accepts=lambda value: isinstance(value, list),
        unit=unit_seq,
        bind=bind_seq,
    )
)


__all__ = (
    "SEQUENCE",
    "unit_seq",
    "flatten",
    "bind_seq",
    "bind_chain_seq",
)
