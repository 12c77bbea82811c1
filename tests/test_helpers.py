import pytest

from linearkit.helpers import (
    fold_add,
    fold_multiply,
    fold_parity,
    fold_string_concatenate,
    map_decrement,
    map_double,
    map_double_print,
    map_half,
    map_increment,
    map_increment_print,
    map_invert,
    map_invert_print,
    map_parity_invert,
    non_empty_string_appender,
    string_appender,
    traverse_print,
)
from linearkit.vector import Vector


def test_traverse_print(capsys):
    Vector([1, 2]).pre_order_traverse(traverse_print)
    assert capsys.readouterr().out == "1 2 "


def test_fold_add_and_multiply_with_vector():
    vec = Vector([4, 3, 5])
    assert vec.pre_order_fold(fold_add, 0) == 12
    assert vec.post_order_fold(fold_multiply, 1) == 60
    assert fold_add(5, 0) == 5
    assert fold_multiply(5, 1) == 5


def test_fold_string_concatenate():
    vec = Vector(["A ", "B "])
    assert vec.pre_order_fold(fold_string_concatenate, "X") == "XA B "
    assert vec.post_order_fold(fold_string_concatenate, "X") == "XB A "


@pytest.mark.parametrize("value", [0, 1, 2, 7, 10])
def test_fold_parity_matches_oddness(value):
    assert fold_parity(value, 0) == (1 if value & 1 else 0)
    assert fold_parity(0, value) == fold_parity(value, 0)


def test_fold_parity_keeps_sign_for_negative():
    assert fold_parity(-3, 0) == -1
    assert fold_parity(-4, 0) == 0


@pytest.mark.parametrize("value", [-5, 0, 3, 2.5])
def test_increment_decrement_round_trip(value):
    assert map_decrement(map_increment(value)) == value
    assert map_increment(value) > value


@pytest.mark.parametrize("value", [-8, 0, 6, 3.5])
def test_double_half_round_trip(value):
    assert map_half(map_double(value)) == value


def test_half_truncates_integers_toward_zero():
    assert map_half(7) == map_half(6)
    assert map_half(-7) == -map_half(7)
    assert map_half(7.0) == pytest.approx(7.0 / 2)


@pytest.mark.parametrize("value", [-4, 0, 9, 1.5])
def test_invert_twice_is_identity(value):
    assert map_invert(map_invert(value)) == value
    assert map_invert(value) == -value


@pytest.mark.parametrize("value", [-3, 1, 7])
def test_parity_invert_negates_odd(value):
    assert map_parity_invert(value) == -value


@pytest.mark.parametrize("value", [-4, 0, 8])
def test_parity_invert_keeps_even(value):
    assert map_parity_invert(value) == value


def test_print_maps_return_and_print(capsys):
    assert map_increment_print(1) == map_increment(1)
    assert map_double_print(3) == map_double(3)
    assert map_invert_print(4) == map_invert(4)
    assert capsys.readouterr().out == "1->2; 3->6; 4->-4; "


def test_string_appender_in_map():
    vec = Vector(["A", "B"])
    vec.pre_order_map(string_appender(" "))
    assert list(vec) == ["A ", "B "]


def test_non_empty_string_appender_skips_empty():
    append = non_empty_string_appender("!")
    assert append("") == ""
    assert append("A") == "A!"
    vec = Vector(["", "B"])
    vec.map(append)
    assert list(vec) == ["", "B!"]