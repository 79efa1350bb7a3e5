"""
Maybe kind
==========

Optional monad on top of kungfu's Option = Some[T] | Nothing.

Nothing is terminal: binding on it returns Nothing without calling the
transform, and chains stop at the first Nothing.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Nothing, Option, Some

from ._errors import KindMismatchError
from .kind import Kind, bind_chainM, register_kind


def some[T](value: T) -> Option[T]:
    """Wrap a present value."""
    return Some(value)


def nothing() -> Option[object]:
    """The absent value."""
    return Nothing()


def from_optional[T](value: T | None) -> Option[T]:
    """None becomes Nothing, anything else Some(value)."""
    if value is None:
        return Nothing()
    return Some(value)


def is_maybe(value: object) -> bool:
    return isinstance(value, (Some, Nothing))


def is_nothing(value: object) -> bool:
    return isinstance(value, Nothing)


def unwrap_or[T](maybe: Option[T], default: T) -> T:
    """Present value, or `default` for Nothing."""
    match maybe:
        case Some():
            return maybe.unwrap()
        case Nothing():
            return default
        case _:
            raise KindMismatchError(MAYBE.name, maybe)


def bind_maybe[T, U](maybe: Option[T], fn: Callable[[T], Option[U]]) -> Option[U]:
    """
    Single-step bind for Option.

    - On Some: returns fn(value) as is, no re-wrapping
    - On Nothing: returns Nothing, fn is not called
    """
    match maybe:
        case Nothing():
            return Nothing()
        case Some():
            result = fn(maybe.unwrap())
            if not is_maybe(result):
                raise KindMismatchError(MAYBE.name, result)
            return result
        case _:
            raise KindMismatchError(MAYBE.name, maybe)


def bind_chain_maybe[T](maybe: Option[T], *fns: Callable[[T], Option[T]]) -> Option[T]:
    """
    Chain bind for Option.

    Checks for Nothing before every step, so transforms after the first
    Nothing are never called.
    """
    return bind_chainM(maybe, *fns, kind=MAYBE)


MAYBE: Kind[Option[object], object] = register_kind(
    Kind(
        name="maybe",
        accepts=is_maybe,
        unit=some,
        bind=bind_maybe,
        halted=is_nothing,
    )
)


__all__ = (
    "MAYBE",
    "some",
    "nothing",
    "from_optional",
    "is_maybe",
    "is_nothing",
    "unwrap_or",
    "bind_maybe",
    "bind_chain_maybe",
)
