"""
Core type definitions for chainbind.

Aliases shared by every container kind.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Transform = monadic step: raw value -> container of the same kind
type Transform[T, M] = Callable[[T], M]

# Unit = wrap function: raw value -> container
type Unit[T, M] = Callable[[T], M]

# Binder = single-step bind for one kind
type Binder[T, M] = Callable[[M, Transform[T, M]], M]

# Halted = terminal-state test used for short-circuit
type Halted[M] = Callable[[M], bool]

__all__ = (
    "Transform",
    "Unit",
    "Binder",
    "Halted",
)
