"""Ready-made functions for traversing, folding and mapping containers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def traverse_print(value: Any) -> None:
    """Print a value followed by a space."""
    print(value, end=" ")


def fold_add(value: Any, acc: Any) -> Any:
    """Return ``acc + value``."""
    return acc + value


def fold_multiply(value: Any, acc: Any) -> Any:
    """Return ``acc * value``."""
    return acc * value


def fold_parity(value: int, acc: int) -> int:
    """Return the remainder of ``acc + value`` by two, keeping its sign."""
    total = acc + value
    remainder = abs(total) % 2
    return -remainder if total < 0 else remainder


def fold_string_concatenate(value: str, acc: str) -> str:
    """Return ``acc`` with ``value`` appended."""
    return acc + value


def map_increment(value: Any) -> Any:
    """Return the value plus one."""
    return value + 1


def map_decrement(value: Any) -> Any:
    """Return the value minus one."""
    return value - 1


def map_increment_print(value: Any) -> Any:
    """Print the value and its increment, and return the increment."""
    result = value + 1
    print(f"{value}->{result}", end="; ")
    return result


def map_double(value: Any) -> Any:
    """Return the value doubled."""
    return value * 2


def map_half(value: Any) -> Any:
    """Return half the value; integers are truncated toward zero."""
    if isinstance(value, int):
        return int(value / 2) if abs(value) < 2**52 else _int_half(value)
    return value / 2


def _int_half(value: int) -> int:
    half = abs(value) // 2
    return -half if value < 0 else half


def map_double_print(value: Any) -> Any:
    """Print the value and its double, and return the double."""
    result = value * 2
    print(f"{value}->{result}", end="; ")
    return result


def map_invert(value: Any) -> Any:
    """Return the negated value."""
    return -value


def map_invert_print(value: Any) -> Any:
    """Print the value and its negation, and return the negation."""
    result = -value
    print(f"{value}->{result}", end="; ")
    return result


def map_parity_invert(value: int) -> int:
    """Negate odd values and leave even ones unchanged."""
    return -value if value % 2 != 0 else value


def string_appender(suffix: str) -> Callable[[str], str]:
    """Return a map function that appends ``suffix`` to a string."""

    def append(value: str) -> str:
        return value + suffix

    return append


def non_empty_string_appender(suffix: str) -> Callable[[str], str]:
    """Return a map function that appends ``suffix`` to non-empty strings."""

    def append(value: str) -> str:
        return value + suffix if value else value

    return append