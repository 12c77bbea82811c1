"""Checks on containers that print a verdict line and keep a running tally."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from linearkit.vector import EmptyContainerError


class CheckTally:
    """Counts checks and failures, writing one report line per check.

    Each check compares what a container does with what was expected:
    ``expected`` is True when the operation should succeed (or the
    comparison should hold) and False when it should fail.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.count = 0
        self.errors = 0

    def __repr__(self) -> str:
        return f"CheckTally(count={self.count}, errors={self.errors})"

    def _header(self) -> str:
        return f" {self.count + 1} ({self.errors}) "

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _conclude(self, text: str, passed: bool) -> None:
        """Finish a report line with its verdict and count the check."""
        verdict = "Correct" if passed else "Error"
        self._write(f"{text}{verdict}!\n")
        self.record(passed)

    def record(self, passed: bool) -> None:
        """Count one check, and one error if it did not pass."""
        self.count += 1
        if not passed:
            self.errors += 1

    def merge(self, other: CheckTally) -> None:
        """Add the counts of another tally to this one."""
        self.count += other.count
        self.errors += other.errors

    # Container

    def empty(self, container: Any, expected: bool) -> None:
        """Check whether the container reports being empty."""
        is_empty = container.is_empty()
        passed = is_empty == expected
        self._conclude(
            f"{self._header()}The container is {'' if is_empty else 'not '}empty: ",
            passed,
        )

    def size(self, container: Any, expected: bool, size: int) -> None:
        """Check whether the container has the given size."""
        length = len(container)
        passed = (length == size) == expected
        self._conclude(f"{self._header()}The container has size {length}: ", passed)

    # Testable

    def exists(self, container: Any, expected: bool, value: Any) -> None:
        """Check whether the container holds the value."""
        found = container.exists(value)
        passed = found == expected
        self._conclude(
            f'{self._header()}Data "{value}" {"does" if found else "does not"} exist: ',
            passed,
        )

    # Traversable and mappable

    def _run_visit(self, label: str, action: Callable[[], Any], expected: bool) -> None:
        self._write(f"{self._header()}Executing {label} - ")
        try:
            action()
        except Exception as exc:
            self._conclude(f'"{exc}": ', not expected)
        else:
            self._conclude(": ", expected)

    def _run_fold(
        self, label: str, action: Callable[[], Any], expected: bool, final: Any
    ) -> None:
        self._write(f"{self._header()}Executing {label} - ")
        try:
            value = action()
        except Exception as exc:
            self._conclude(f'"{exc}": ', not expected)
        else:
            passed = (value == final) == expected
            self._conclude(f'obtained value is "{value}": ', passed)

    def traverse(self, container: Any, expected: bool, fun: Callable[[Any], Any]) -> None:
        """Check that a traversal completes (or fails) as expected."""
        self._run_visit("traverse", lambda: container.traverse(fun), expected)

    def traverse_pre_order(
        self, container: Any, expected: bool, fun: Callable[[Any], Any]
    ) -> None:
        """Check that a pre-order traversal completes (or fails) as expected."""
        self._run_visit(
            "traverse in pre order", lambda: container.pre_order_traverse(fun), expected
        )

    def traverse_post_order(
        self, container: Any, expected: bool, fun: Callable[[Any], Any]
    ) -> None:
        """Check that a post-order traversal completes (or fails) as expected."""
        self._run_visit(
            "traverse in post order", lambda: container.post_order_traverse(fun), expected
        )

    def fold(
        self, container: Any, expected: bool, fun: Callable[[Any, Any], Any],
        initial: Any, final: Any,
    ) -> None:
        """Check whether folding from ``initial`` yields ``final``."""
        self._run_fold("fold", lambda: container.fold(fun, initial), expected, final)

    def fold_pre_order(
        self, container: Any, expected: bool, fun: Callable[[Any, Any], Any],
        initial: Any, final: Any,
    ) -> None:
        """Check whether a pre-order fold from ``initial`` yields ``final``."""
        self._run_fold(
            "fold in pre order",
            lambda: container.pre_order_fold(fun, initial),
            expected,
            final,
        )

    def fold_post_order(
        self, container: Any, expected: bool, fun: Callable[[Any, Any], Any],
        initial: Any, final: Any,
    ) -> None:
        """Check whether a post-order fold from ``initial`` yields ``final``."""
        self._run_fold(
            "fold in post order",
            lambda: container.post_order_fold(fun, initial),
            expected,
            final,
        )

    def map(self, container: Any, expected: bool, fun: Callable[[Any], Any]) -> None:
        """Check that a map completes (or fails) as expected."""
        self._run_visit("map", lambda: container.map(fun), expected)

    def map_pre_order(
        self, container: Any, expected: bool, fun: Callable[[Any], Any]
    ) -> None:
        """Check that a pre-order map completes (or fails) as expected."""
        self._run_visit(
            "map in pre order", lambda: container.pre_order_map(fun), expected
        )

    def map_post_order(
        self, container: Any, expected: bool, fun: Callable[[Any], Any]
    ) -> None:
        """Check that a post-order map completes (or fails) as expected."""
        self._run_visit(
            "map in post order", lambda: container.post_order_map(fun), expected
        )

    # Linear

    def _run_equality(
        self, noun: str, first: Any, second: Any, expected: bool, negated: bool
    ) -> None:
        self._write(f"{self._header()}The two {noun} are ")
        try:
            result = (first != second) if negated else (first == second)
        except Exception as exc:
            self._conclude(f'"{exc}": ', not expected)
        else:
            equal = not result if negated else result
            passed = result == expected
            self._conclude(f"{'' if equal else 'not '}equal: ", passed)

    def equal_linear(self, first: Any, second: Any, expected: bool) -> None:
        """Check whether two linear containers compare equal."""
        self._run_equality("linear containers", first, second, expected, negated=False)

    def non_equal_linear(self, first: Any, second: Any, expected: bool) -> None:
        """Check whether two linear containers compare unequal."""
        self._run_equality("linear containers", first, second, expected, negated=True)

    def _run_access(
        self,
        description: str,
        action: Callable[[], Any],
        expected: bool,
        value: Any,
        error_type: type[Exception],
    ) -> None:
        self._write(f"{self._header()}{description}")
        try:
            got = action()
        except error_type as exc:
            self._conclude(f'"{exc}": ', not expected)
        except Exception as exc:
            self._write(f"\nWrong exception: {exc}!\n")
            self.record(False)
        else:
            passed = (got == value) == expected
            self._conclude(f'"{got}": ', passed)

    def get_at(self, container: Any, expected: bool, index: int, value: Any) -> None:
        """Check whether the value at ``index`` equals ``value``."""
        self._run_access(
            f'Get of the linear container at index "{index}" with value ',
            lambda: container[index],
            expected,
            value,
            IndexError,
        )

    def get_front(self, container: Any, expected: bool, value: Any) -> None:
        """Check whether the front of the container equals ``value``."""
        self._run_access(
            "The front of the linear container is ",
            container.front,
            expected,
            value,
            EmptyContainerError,
        )

    def get_back(self, container: Any, expected: bool, value: Any) -> None:
        """Check whether the back of the container equals ``value``."""
        self._run_access(
            "The back of the linear container is ",
            container.back,
            expected,
            value,
            EmptyContainerError,
        )

    def _run_store(
        self,
        description: str,
        store: Callable[[], Any],
        expected: bool,
        value: Any,
        error_type: type[Exception],
    ) -> None:
        self._write(f"{self._header()}{description}")
        try:
            got = store()
        except error_type as exc:
            self._conclude(f'"{exc}": ', not expected)
        except Exception as exc:
            self._write(f"\nWrong exception: {exc}!\n")
            self.record(False)
        else:
            passed = (got == value) == expected
            self._conclude("", passed)

    def set_at(self, container: Any, expected: bool, index: int, value: Any) -> None:
        """Store ``value`` at ``index`` and check that it reads back."""

        def store() -> Any:
            container[index] = value
            return container[index]

        self._run_store(
            f'Set of the linear container at index "{index}" with value "{value}": ',
            store,
            expected,
            value,
            IndexError,
        )

    def set_front(self, container: Any, expected: bool, value: Any) -> None:
        """Store ``value`` at the front and check that it reads back."""

        def store() -> Any:
            container.front()
            container[0] = value
            return container.front()

        self._run_store(
            f'Setting the front of the linear container to "{value}": ',
            store,
            expected,
            value,
            EmptyContainerError,
        )

    def set_back(self, container: Any, expected: bool, value: Any) -> None:
        """Store ``value`` at the back and check that it reads back."""

        def store() -> Any:
            container.back()
            container[len(container) - 1] = value
            return container.back()

        self._run_store(
            f'Setting the back of the linear container to "{value}": ',
            store,
            expected,
            value,
            EmptyContainerError,
        )

    # Vector

    def equal_vector(self, first: Any, second: Any, expected: bool) -> None:
        """Check whether two vectors compare equal."""
        self._run_equality("vectors", first, second, expected, negated=False)

    def non_equal_vector(self, first: Any, second: Any, expected: bool) -> None:
        """Check whether two vectors compare unequal."""
        self._run_equality("vectors", first, second, expected, negated=True)