"""Scripted checks of the vector containers, reported as a running tally."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any, TextIO

from linearkit.checks import CheckTally
from linearkit.helpers import (
    fold_add,
    fold_multiply,
    fold_string_concatenate,
    string_appender,
)
from linearkit.vector import SortableVector


def _printer(out: TextIO) -> Callable[[Any], None]:
    """Return a traversal function that writes each value and a space to ``out``."""

    def show(value: Any) -> None:
        out.write(f"{value} ")

    return show


def _run_section(
    tally: CheckTally, title: str, body: Callable[[CheckTally], None]
) -> None:
    """Run ``body`` on a fresh tally, report its totals and merge them into ``tally``."""
    local = CheckTally(tally.out)
    tally.out.write(f"\nBegin of {title} Test:\n")
    try:
        body(local)
    except Exception:
        local.record(False)
        local.out.write("\nUnmanaged error! \n")
    tally.out.write(
        f"End of {title} Test! (Errors/Tests: {local.errors}/{local.count})\n"
    )
    tally.merge(local)


def _vector_int_checks(t: CheckTally) -> None:
    show = _printer(t.out)

    vec = SortableVector()
    t.empty(vec, True)
    t.get_front(vec, False, 0)
    t.get_back(vec, False, 0)
    t.set_at(vec, False, 1, 0)
    t.get_at(vec, False, 2, 0)
    t.exists(vec, False, 0)
    t.traverse_pre_order(vec, True, show)
    t.traverse_post_order(vec, True, show)
    t.fold_pre_order(vec, True, fold_add, 0, 0)
    t.fold_post_order(vec, True, fold_add, 0, 0)

    vec = SortableVector(3)
    t.empty(vec, False)
    t.size(vec, True, 3)
    t.set_at(vec, True, 0, 4)
    t.set_at(vec, True, 1, 3)
    t.set_at(vec, True, 2, 1)
    t.get_front(vec, True, 4)
    t.get_back(vec, True, 1)
    t.set_front(vec, True, 5)
    t.set_back(vec, True, 4)
    t.exists(vec, True, 4)
    t.traverse_pre_order(vec, True, show)
    t.traverse_post_order(vec, True, show)
    t.fold_pre_order(vec, True, fold_add, 0, 12)
    t.fold_post_order(vec, True, fold_multiply, 1, 60)

    vec.sort()
    t.traverse_pre_order(vec, True, show)
    t.traverse_post_order(vec, True, show)

    vec.resize(2)
    t.fold_post_order(vec, True, fold_multiply, 1, 12)


def _vector_double_checks(t: CheckTally) -> None:
    vec = SortableVector(3)
    t.empty(vec, False)
    t.size(vec, True, 3)
    t.set_at(vec, True, 0, 5.5)
    t.set_at(vec, True, 1, 3.3)
    t.set_at(vec, True, 2, 1.1)
    t.get_front(vec, True, 5.5)
    t.get_back(vec, True, 1.1)
    t.exists(vec, True, 3.3)
    t.fold_pre_order(vec, True, fold_add, 0.0, 9.9)
    t.fold_post_order(vec, True, fold_multiply, 1.0, 19.965)


def _vector_string_checks(t: CheckTally) -> None:
    show = _printer(t.out)

    vec = SortableVector(2)
    t.empty(vec, False)
    t.size(vec, True, 2)
    t.set_at(vec, True, 0, "A")
    t.set_at(vec, True, 1, "B")
    t.get_front(vec, True, "A")
    t.get_back(vec, True, "B")
    t.exists(vec, True, "A")

    t.map_pre_order(vec, True, string_appender(" "))
    t.traverse_pre_order(vec, True, show)
    t.fold_pre_order(vec, True, fold_string_concatenate, "X", "XA B ")
    t.fold_post_order(vec, True, fold_string_concatenate, "X", "XB A ")
    t.exists(vec, False, "A")

    copvec = SortableVector(vec)
    t.equal_vector(vec, copvec, True)
    t.map_pre_order(vec, True, string_appender("!"))
    t.non_equal_vector(vec, copvec, True)

    # Moving one vector into another exchanges their contents.
    vec, copvec = copvec, vec
    t.fold_pre_order(copvec, True, fold_string_concatenate, "?", "?A !B !")

    # Moving into a new vector leaves the source empty.
    movvec, vec = vec, SortableVector()
    t.fold_pre_order(movvec, True, fold_string_concatenate, "?", "?A B ")
    movvec.sort()
    t.fold_pre_order(movvec, True, fold_string_concatenate, "?", "?A B ")
    t.set_at(vec, False, 1, "")
    vec.resize(1)
    t.set_at(vec, True, 0, "X")

    movvec.clear()
    t.empty(movvec, True)


def run_vector_int(tally: CheckTally) -> None:
    """Run the checks on a vector of integers and add them to ``tally``."""
    _run_section(tally, "Vector<int>", _vector_int_checks)


def run_vector_double(tally: CheckTally) -> None:
    """Run the checks on a vector of floats and add them to ``tally``."""
    _run_section(tally, "Vector<double>", _vector_double_checks)


def run_vector_string(tally: CheckTally) -> None:
    """Run the checks on a vector of strings and add them to ``tally``."""
    _run_section(tally, "Vector<string>", _vector_string_checks)


def run_vector_suite(tally: CheckTally) -> None:
    """Run every vector check, report the totals and add them to ``tally``."""
    local = CheckTally(tally.out)
    run_vector_int(local)
    run_vector_double(local)
    run_vector_string(local)
    tally.merge(local)
    tally.out.write(
        f"\nExercise 1A - Vector (Errors/Tests: {local.errors}/{local.count})\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the whole check suite, printing the report to standard output."""
    parser = argparse.ArgumentParser(
        prog="linearkit", description="Run the container check suite."
    )
    parser.parse_args(argv)

    tally = CheckTally()
    out = tally.out
    out.write("\n~*~#~*~ Welcome to the LASD Test Suite ~*~#~*~ \n")

    exercise = CheckTally(out)
    run_vector_suite(exercise)
    out.write(
        f"\nExercise 1A (Simple Test) (Errors/Tests: "
        f"{exercise.errors}/{exercise.count})\n"
    )
    tally.merge(exercise)

    out.write(f"\nExercise 1 (Simple Test) (Errors/Tests: {tally.errors}/{tally.count})")
    out.write("\nGoodbye!\n")
    out.flush()
    return 0