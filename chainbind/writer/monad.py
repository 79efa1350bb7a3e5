"""Logged kind (writer monad)

Bind runs the transform once on the carried value and appends the
transform's log to the current one. There is no terminal state, so chains
always run to the end."""

from __future__ import annotations

from collections.abc import Callable

from .._errors import KindMismatchError
from ..kind import Kind, bind_chainM, register_kind
from .log import Log
from .logged import Logged


def unit_logged[T](value: T) -> Logged[T, object]:
    """Wrap a value with an empty log."""
    return Logged(value, Log())


def logged[T, W](value: T, *entries: W) -> Logged[T, W]:
    """Wrap a value together with log entries."""
    return Logged(value, Log.of(*entries))


def tell[W](*entries: W) -> Logged[None, W]:
    """Log entries without a meaningful value."""
    return Logged(None, Log.of(*entries))


def bind_logged[T, U, W](
    current: Logged[T, W],
    fn: Callable[[T], Logged[U, W]],
    /,
) -> Logged[U, W]:
    """
    Monadic bind for Logged.

    The result carries fn's value and current.log followed by fn's log.
    """
    if not isinstance(current, Logged):
        raise KindMismatchError(LOGGED.name, current)
    step = fn(current.value)
    if not isinstance(step, Logged):
        raise KindMismatchError(LOGGED.name, step)
    return Logged(step.value, current.log.combine(step.log))


def bind_chain_logged[T, W](
    current: Logged[T, W],
    *fns: Callable[[T], Logged[T, W]],
) -> Logged[T, W]:
    """Chain bind for Logged. Logs accumulate left to right."""
    return bind_chainM(current, *fns, kind=LOGGED)


LOGGED: Kind[Logged[object, object], object] = register_kind(
    Kind(
        name="logged",
        accepts=lambda value: isinstance(value, Logged),
        unit=unit_logged,
        bind=bind_logged,
    )
)


__all__ = (
    "LOGGED",
    "unit_logged",
    "logged",
    "tell",
    "bind_logged",
    "bind_chain_logged",
)
