"""
Generic bind over container kinds.

Architecture:
- Kind[M, T] - capability record: accepts + unit + bind + halted
- bindM / bind_chainM - generic operations parameterized by a Kind
- bind / bind_chain / unit - sugar dispatching through the kind registry

For custom containers:
1. Build a Kind with your unit and single-step bind
2. Register it with register_kind()
3. bind()/bind_chain() now accept your container
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ._config import get_settings
from ._errors import KindMismatchError, NotBindableError
from ._helpers import describe
from ._logging import get_logger
from ._types import Binder, Halted, Transform, Unit

logger = get_logger(__name__)


def never_halted(container: object) -> bool:
    """Halted predicate for kinds without a terminal state."""
    _ = container
    return False


# ============================================================================
# Kind capability
# ============================================================================


@dataclass(frozen=True, slots=True)
class Kind[M, T]:
    """
    One container kind and the operations the generic bind needs.

    Kinds are peers: sequence, maybe and logged are three values of this
    record, not subclasses of each other.
    """

    name: str
    accepts: Callable[[object], bool]
    unit: Unit[T, M]
    bind: Binder[T, M]
    halted: Halted[M] = never_halted

    def check(self, container: object) -> M:
        """Return container unchanged, raise KindMismatchError if foreign."""
        if not self.accepts(container):
            raise KindMismatchError(self.name, container)
        return container  # type: ignore[return-value]


# ============================================================================
# Generic operations
# ============================================================================


def bindM[M, T](container: M, fn: Transform[T, M], *, kind: Kind[M, T]) -> M:
    """
    Generic single-step bind.

    Args:
        container: Container of `kind`
        fn: Transform from a raw value to a container of the same kind
        kind: Kind describing how to bind
    """
    kind.check(container)
    return kind.check(kind.bind(container, fn))


def bind_chainM[M, T](container: M, *fns: Transform[T, M], kind: Kind[M, T]) -> M:
    """
    Generic chain bind: apply transforms left to right.

    Halted containers stop the chain before the next transform is called.
    With no transforms the input comes back as is.
    """
    current = kind.check(container)
    trace = get_settings().trace

    for step, fn in enumerate(fns):
        if kind.halted(current):
            if trace:
                logger.debug(
                    "bind.short_circuit",
                    kind=kind.name,
                    step=step,
                    skipped=len(fns) - step,
                )
            return current
        if trace:
            logger.debug("bind.step", kind=kind.name, step=step, transform=describe(fn))
        current = bindM(current, fn, kind=kind)

    return current


# ============================================================================
# Registry
# ============================================================================


_KINDS: list[Kind[object, object]] = []


def register_kind[M, T](kind: Kind[M, T]) -> Kind[M, T]:
    """Make `kind` available to bind()/bind_chain() dispatch."""
    for known in _KINDS:
        if known is kind:
            return kind
        if known.name == kind.name:
            raise ValueError(f"Kind {kind.name!r} is already registered")
    _KINDS.append(kind)  # type: ignore[arg-type]
    return kind


def registered_kinds() -> tuple[Kind[object, object], ...]:
    """Registered kinds in dispatch order."""
    return tuple(_KINDS)


def get_kind(name: str) -> Kind[object, object]:
    """Look a kind up by name."""
    for kind in _KINDS:
        if kind.name == name:
            return kind
    raise ValueError(f"Unknown kind {name!r}")


def kind_of(container: object) -> Kind[object, object]:
    """Find the registered kind accepting `container`."""
    for kind in _KINDS:
        if kind.accepts(container):
            return kind
    raise NotBindableError(container)


# ============================================================================
# Sugar (registry dispatch)
# ============================================================================


def unit[M, T](value: T, kind: Kind[M, T] | str) -> M:
    """Wrap a raw value into the container of `kind` (a Kind or its name)."""
    if isinstance(kind, str):
        kind = get_kind(kind)  # type: ignore[assignment]
    return kind.unit(value)  # type: ignore[union-attr]


def bind[M, T](container: M, fn: Transform[T, M]) -> M:
    """Single-step bind for any registered container."""
    return bindM(container, fn, kind=kind_of(container))  # type: ignore[arg-type]


def bind_chain[M, T](container: M, *fns: Transform[T, M]) -> M:
    """Chain bind for any registered container."""
    return bind_chainM(container, *fns, kind=kind_of(container))  # type: ignore[arg-type]


__all__ = (
    # Capability
    "Kind",
    "never_halted",
    # Generic
    "bindM",
    "bind_chainM",
    # Registry
    "register_kind",
    "registered_kinds",
    "get_kind",
    "kind_of",
    # Sugar
    "unit",
    "bind",
    "bind_chain",
)
