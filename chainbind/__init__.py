"""
chainbind - the monad pattern through three container kinds.

Core building blocks: wrap a raw value (unit), bind one transform, or
chain-bind several transforms left to right.

Architecture:
- Generic operations (bindM, bind_chainM) work with any Kind record
- Sugar per kind: *_seq (list), *_maybe (kungfu Option), *_logged (Logged)
- bind/bind_chain dispatch on the container through the kind registry
"""

# Core types
from ._types import Binder, Halted, Transform, Unit

# Generic bind + registry
from .kind import (
    Kind,
    bind,
    bind_chain,
    bind_chainM,
    bindM,
    get_kind,
    kind_of,
    never_halted,
    register_kind,
    registered_kinds,
    unit,
)

# Sequence kind
from .sequence import SEQUENCE, bind_chain_seq, bind_seq, flatten, unit_seq

# Maybe kind
from .maybe import (
    MAYBE,
    bind_chain_maybe,
    bind_maybe,
    from_optional,
    is_maybe,
    is_nothing,
    nothing,
    some,
    unwrap_or,
)

# Logged kind (writer monad)
from . import writer
from .writer import (
    LOGGED,
    Log,
    Logged,
    bind_chain_logged,
    bind_logged,
    logged,
    tell,
    unit_logged,
)

# Sample transforms
from . import samples

# Logging / config
from ._config import Settings, get_settings
from ._logging import configure_logging, get_logger

# Errors
from ._errors import KindMismatchError, NotBindableError

__all__ = (
    # Types
    "Binder",
    "Halted",
    "Transform",
    "Unit",
    # Generic
    "Kind",
    "bindM",
    "bind_chainM",
    "never_halted",
    # Registry
    "register_kind",
    "registered_kinds",
    "get_kind",
    "kind_of",
    # Dispatch
    "unit",
    "bind",
    "bind_chain",
    # Sequence
    "SEQUENCE",
    "unit_seq",
    "flatten",
    "bind_seq",
    "bind_chain_seq",
    # Maybe
    "MAYBE",
    "some",
    "nothing",
    "from_optional",
    "is_maybe",
    "is_nothing",
    "unwrap_or",
    "bind_maybe",
    "bind_chain_maybe",
    # Logged
    "writer",
    "LOGGED",
    "Log",
    "Logged",
    "unit_logged",
    "logged",
    "tell",
    "bind_logged",
    "bind_chain_logged",
    # Samples
    "samples",
    # Logging / config
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Errors
    "KindMismatchError",
    "NotBindableError",
)
