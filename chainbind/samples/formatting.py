"""
Number formatting transforms for the logged kind.

Each transform parses a decimal string, formats it, and records which
formatting was applied in the log.
"""

from __future__ import annotations

import math
import re

from ..writer import Logged, logged

# Leading decimal literal, the rest of the string is ignored
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)")


def parse_number(text: str) -> float:
    """
    Parse the leading number of `text`; NaN when there is none.

    Example:
        parse_number("12.34kg")  # 12.34
        parse_number("kg")       # nan
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def _special(x: float) -> str | None:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    return None


def to_fixed(text: str, digits: int = 3) -> Logged[str, str]:
    """Fixed-point notation with `digits` decimals."""
    x = parse_number(text)
    value = _special(x) or f"{x:.{digits}f}"
    return logged(value, f"{text} toFixed({digits}) is used")


def to_exponential(text: str, digits: int = 5) -> Logged[str, str]:
    """Exponential notation with `digits` decimals, exponent without padding (1.23400e+1)."""
    x = parse_number(text)
    value = _special(x)
    if value is None:
        mantissa, exponent = f"{x:.{digits}e}".split("e")
        value = f"{mantissa}e{int(exponent):+d}"
    return logged(value, f"{text} toExponential({digits}) is used")


__all__ = (
    "parse_number",
    "to_fixed",
    "to_exponential",
)
