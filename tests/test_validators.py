import math
import numpy as np
import pytest
import dicekeep as dk
from dicekeep import validators as v

class TestIntegers:
    def test_integer(self):
        assert v.check_integer(7) == 7
        assert v.check_integer(np.int32(-2)) == -2

    @pytest.mark.parametrize("value", [1.0, "1", None, True, math.inf])
    def test_not_integer(self, value):
        with pytest.raises(dk.InvalidValueError, match=r".*not an integer.*"):
            v.check_integer(value)

    def test_infinity(self):
        assert v.check_integer(-math.inf, allow_infinity=True) == -math.inf
        with pytest.raises(dk.InvalidValueError):
            v.check_integer(math.nan, allow_infinity=True)

    def test_constraint_is_enforced(self):
        with pytest.raises(dk.InvalidValueError, match=r".*too big.*"):
            v.check_integer(11, message="too big", constraint=lambda x: x <= 10)

    def test_signs(self):
        assert v.check_negative_integer(-1) == -1
        assert v.check_positive_integer(1) == 1
        assert v.check_non_negative_integer(0) == 0
        assert v.check_zero(0) == 0
        for check, value in [(v.check_negative_integer, 0),
                             (v.check_positive_integer, 0),
                             (v.check_non_negative_integer, -1),
                             (v.check_zero, 1)]:
            with pytest.raises(dk.InvalidValueError):
                check(value)

    def test_combined_constraint(self):
        assert v.check_positive_integer(4, constraint=lambda x: x % 2 == 0) == 4
        with pytest.raises(dk.InvalidValueError):
            v.check_positive_integer(3, constraint=lambda x: x % 2 == 0)

def test_digit():
    assert [v.check_digit(d) for d in range(10)] == list(range(10))
    for value in [-1, 10, "5"]:
        with pytest.raises(dk.InvalidValueError, match=r".*digit.*"):
            v.check_digit(value)

class TestLetters:
    def test_letter(self):
        assert v.check_letter("x") == "x"
        assert v.check_letter("ab", max_length=2) == "ab"

    @pytest.mark.parametrize("value", ["", "ab", 1, None])
    def test_not_letter(self, value):
        with pytest.raises(dk.InvalidValueError, match=r".*Invalid letter.*"):
            v.check_letter(value)

    def test_rejected(self):
        with pytest.raises(dk.InvalidValueError):
            v.check_letter("q", rejected=("q",))

    def test_bad_max_length(self):
        with pytest.raises(TypeError, match=r".*max_length.*"):
            v.check_letter("a", max_length="1")

    def test_letter_digit(self):
        assert v.check_letter_digit("C", first="A", last="F") == "C"
        for value in ["G", "a", "5"]:
            with pytest.raises(dk.InvalidValueError, match=r".*letter digit.*"):
                v.check_letter_digit(value, first="A", last="F")

    def test_letter_digit_excluded(self):
        with pytest.raises(dk.InvalidValueError):
            v.check_letter_digit("I", excluded=("I", "O"))

def test_hex_digit():
    for value in list(range(10)) + list("ABCDEF"):
        assert v.check_hex_digit(value) == value
    for value in [10, -1, "G", "a", "AB", None, 1.5]:
        with pytest.raises(dk.InvalidValueError, match=r".*Invalid hex digit.*"):
            v.check_hex_digit(value)

def test_hex_die_with_hex_comparison():
    sides = [v.check_hex_digit(side) for side in [0, 7, "B", 9, "E"]]
    assert dk.KeepBest(2, dk.hex_digit_comparison).combine(sides) == ["E", "B"]
