"""Resizable vectors with traversal, fold and map operations."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

_OUT_OF_RANGE = "Index out of range for the vector size"


class EmptyContainerError(LookupError):
    """Raised when the front or back of an empty container is requested."""


class Vector:
    """A fixed-size sequence that can be resized explicitly.

    A vector is built either with a given size, its slots holding ``None``,
    or from any iterable, whose values are copied in order.
    """

    __slots__ = ("_items",)

    def __init__(self, source: int | Iterable[Any] | None = None) -> None:
        if source is None:
            self._items: list[Any] = []
        elif isinstance(source, bool):
            raise TypeError("a vector size must be an integer, not a bool")
        elif isinstance(source, int):
            if source < 0:
                raise ValueError("a vector size cannot be negative")
            self._items = [None] * source
        else:
            self._items = list(source)

    def __len__(self) -> int:
        return len(self._items)

    def _position(self, index: Any) -> int:
        position = operator.index(index)
        if not 0 <= position < len(self._items):
            raise IndexError(_OUT_OF_RANGE)
        return position

    def __getitem__(self, index: int) -> Any:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._position(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def is_empty(self) -> bool:
        """Return True when the vector holds no slots."""
        return not self._items

    def resize(self, size: int) -> None:
        """Change the size, keeping the common prefix and padding with None."""
        size = operator.index(size)
        if size < 0:
            raise ValueError("a vector size cannot be negative")
        kept = self._items[:size]
        kept.extend([None] * (size - len(kept)))
        self._items = kept

    def clear(self) -> None:
        """Remove every slot."""
        self._items = []

    def front(self) -> Any:
        """Return the first value."""
        if not self._items:
            raise EmptyContainerError("the vector is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the last value."""
        if not self._items:
            raise EmptyContainerError("the vector is empty")
        return self._items[-1]

    def exists(self, value: Any) -> bool:
        """Return True when an equal value is stored."""
        return value in self._items

    def traverse(self, fun: Callable[[Any], Any]) -> None:
        """Call ``fun`` on each value, front to back."""
        self.pre_order_traverse(fun)

    def pre_order_traverse(self, fun: Callable[[Any], Any]) -> None:
        """Call ``fun`` on each value, front to back."""
        for value in self._items:
            fun(value)

    def post_order_traverse(self, fun: Callable[[Any], Any]) -> None:
        """Call ``fun`` on each value, back to front."""
        for value in reversed(self._items):
            fun(value)

    def fold(self, fun: Callable[[Any, Any], Any], acc: Any) -> Any:
        """Accumulate ``fun(value, acc)`` front to back."""
        return self.pre_order_fold(fun, acc)

    def pre_order_fold(self, fun: Callable[[Any, Any], Any], acc: Any) -> Any:
        """Accumulate ``fun(value, acc)`` front to back."""
        for value in self._items:
            acc = fun(value, acc)
        return acc

    def post_order_fold(self, fun: Callable[[Any, Any], Any], acc: Any) -> Any:
        """Accumulate ``fun(value, acc)`` back to front."""
        for value in reversed(self._items):
            acc = fun(value, acc)
        return acc

    def map(self, fun: Callable[[Any], Any]) -> None:
        """Replace each value with ``fun(value)``, front to back."""
        self.pre_order_map(fun)

    def pre_order_map(self, fun: Callable[[Any], Any]) -> None:
        """Replace each value with ``fun(value)``, front to back."""
        self._items = [fun(value) for value in self._items]

    def post_order_map(self, fun: Callable[[Any], Any]) -> None:
        """Replace each value with ``fun(value)``, back to front."""
        mapped = [fun(value) for value in reversed(self._items)]
        mapped.reverse()
        self._items = mapped


class SortableVector(Vector):
    """A vector that can sort its values in ascending order."""

    __slots__ = ()

    def sort(self) -> None:
        """Sort the values in place, ascending."""
        self._items.sort()