"""
Logged - value paired with its annotation
=========================================
"""

from __future__ import annotations

from collections.abc import Iterable

from .log import Log


class Logged[T, W]:
    """
    Annotated value: `value` plus the `log` of steps that produced it.

    Immutable. The log passed in is copied, so later changes to the
    caller's list do not leak into the container.
    """

    __slots__ = ("_value", "_log")
    __match_args__ = ("value", "log")

    def __init__(self, value: T, log: Iterable[W] = ()) -> None:
        self._value = value
        self._log: Log[W] = Log(log)

    @property
    def value(self) -> T:
        """The carried value."""
        return self._value

    @property
    def log(self) -> Log[W]:
        """A copy of the accumulated log."""
        return Log(self._log)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Logged):
            return NotImplemented
        return self._value == other._value and self._log == other._log

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Logged({self._value!r}, log={list(self._log)!r})"


__all__ = ("Logged",)
