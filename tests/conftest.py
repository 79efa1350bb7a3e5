"""
Pytest configuration and fixtures
"""
from collections.abc import Callable

import pytest
import structlog

from chainbind import get_settings


class Counting:
    """Transform stub that records how often it was called."""

    def __init__(self, fn: Callable) -> None:
        self.fn = fn
        self.calls = 0

    def __call__(self, value):
        self.calls += 1
        return self.fn(value)


@pytest.fixture
def counting() -> Callable[[Callable], Counting]:
    """Factory wrapping a transform into a call-counting stub"""
    return Counting


@pytest.fixture
def trace_on(monkeypatch):
    """Enable per-step bind tracing for one test"""
    monkeypatch.setattr(get_settings(), "trace", True)
    yield
    structlog.reset_defaults()
