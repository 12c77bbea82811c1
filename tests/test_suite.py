import io

import pytest

from linearkit.checks import CheckTally
from linearkit.suite import (
    main,
    run_vector_double,
    run_vector_int,
    run_vector_string,
    run_vector_suite,
)


def _tally():
    return CheckTally(io.StringIO())


def test_vector_int_all_pass():
    tally = _tally()
    run_vector_int(tally)
    assert tally.count == 27
    assert tally.errors == 0
    text = tally.out.getvalue()
    assert "Begin of Vector<int> Test:" in text
    assert "End of Vector<int> Test! (Errors/Tests: 0/27)" in text
    assert "Unmanaged error!" not in text


def test_vector_int_traversal_output():
    tally = _tally()
    run_vector_int(tally)
    text = tally.out.getvalue()
    assert "5 3 4 " in text
    assert "4 3 5 " in text
    assert "3 4 5 " in text
    assert "5 4 3 " in text


def test_vector_string_all_pass():
    tally = _tally()
    run_vector_string(tally)
    assert tally.count == 21
    assert tally.errors == 0
    text = tally.out.getvalue()
    assert 'obtained value is "XA B "' in text
    assert 'obtained value is "?A !B !"' in text


def test_vector_double_errors_match_verdicts():
    tally = _tally()
    run_vector_double(tally)
    text = tally.out.getvalue()
    assert tally.count == 10
    assert tally.errors == text.count("Error!")
    assert tally.count - tally.errors == text.count("Correct!")


@pytest.mark.parametrize("runner", [run_vector_int, run_vector_double, run_vector_string])
def test_runner_merges_into_existing_tally(runner):
    fresh = _tally()
    runner(fresh)
    seeded = _tally()
    seeded.record(False)
    runner(seeded)
    assert seeded.count == fresh.count + 1
    assert seeded.errors == fresh.errors + 1


def test_suite_totals_are_sum_of_parts():
    parts = _tally()
    run_vector_int(parts)
    run_vector_double(parts)
    run_vector_string(parts)
    whole = _tally()
    run_vector_suite(whole)
    assert whole.count == parts.count
    assert whole.errors == parts.errors
    text = whole.out.getvalue()
    assert f"Exercise 1A - Vector (Errors/Tests: {whole.errors}/{whole.count})" in text


def test_main_reports_and_returns_zero(capsys):
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "~*~#~*~ Welcome to the LASD Test Suite ~*~#~*~" in text
    assert "Exercise 1A (Simple Test) (Errors/Tests:" in text
    assert "Exercise 1 (Simple Test) (Errors/Tests:" in text
    assert text.rstrip().endswith("Goodbye!")


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])