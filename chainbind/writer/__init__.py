"""
Writer Monad
============

Logged[T, W] - a value carried together with an append-only Log[W].
Binding concatenates logs oldest first.
"""

from .log import Log
from .logged import Logged
from .monad import LOGGED, bind_chain_logged, bind_logged, logged, tell, unit_logged

__all__ = (
    "Log",
    "Logged",
    "LOGGED",
    "unit_logged",
    "logged",
    "tell",
    "bind_logged",
    "bind_chain_logged",
)
