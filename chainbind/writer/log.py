"""
Log - append-only annotation for Logged values
==============================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered annotation carried by a Logged value.

    A list with monoid operations that never touch the receiver:
    - empty: Log()
    - combine: concatenation, oldest entries first

    Laws:
    - Log().combine(x) == x == x.combine(Log())
    - (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        """Build a log from entries."""
        return Log[T](entries)

    def combine(self, other: list[A], /) -> Log[A]:
        """
        New log holding self's entries followed by other's.

        Example:
            Log.of("parsed").combine(Log.of("rounded"))  # Log(["parsed", "rounded"])
        """
        return Log([*self, *other])

    def tell(self, entry: A, /) -> Log[A]:
        """New log with one more entry at the end."""
        return Log([*self, entry])

    def render(self, sep: str = "\n") -> str:
        """Entries joined into one string."""
        return sep.join(str(entry) for entry in self)


__all__ = ("Log",)
