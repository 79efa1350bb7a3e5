"""
Sample transforms for the three container kinds.

- integers: Option[int] arithmetic that fails into Nothing
- formatting: Logged[str, str] number formatting
- emoji: list transforms that fan one string out into several
"""

from .emoji import faces, flags, fruits
from .formatting import parse_number, to_exponential, to_fixed
from .integers import add1, divide_by_2, divide_by_3, maybe_integer, multiply_by_2

__all__ = (
    # integers
    "maybe_integer",
    "add1",
    "multiply_by_2",
    "divide_by_2",
    "divide_by_3",
    # formatting
    "parse_number",
    "to_fixed",
    "to_exponential",
    # emoji
    "fruits",
    "faces",
    "flags",
)
