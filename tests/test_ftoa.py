import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from friendlynum.ftoa import (
    ftoa,
    ftoa_with_digits,
    strip_trailing_digits,
    strip_trailing_zeros,
)


@pytest.mark.parametrize(
    "num, expected",
    [
        (200, "200"),
        (20.0, "20"),
        (2, "2"),
        (2.2, "2.2"),
        (2.02, "2.02"),
        (200.02, "200.02"),
    ],
)
def test_ftoa(num, expected):
    assert ftoa(num) == expected


@pytest.mark.parametrize(
    "num, digits, expected",
    [
        (1.23, 0, "1"),
        (20.0, 0, "20"),
        (1.23, 1, "1.2"),
        (1.23, 2, "1.23"),
        (1.23, 3, "1.23"),
    ],
)
def test_ftoa_with_digits(num, digits, expected):
    assert ftoa_with_digits(num, digits) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.00000", "2"),
        ("2.0000", "2"),
        ("2.0", "2"),
        ("2", "2"),
        ("200", "200"),
        ("2.50", "2.5"),
    ],
)
def test_strip_trailing_zeros(text, expected):
    assert strip_trailing_zeros(text) == expected


_digit_runs = st.text(alphabet="0123456789", max_size=19)


@st.composite
def _number_and_digits(draw):
    left = draw(_digit_runs)
    right = draw(_digit_runs)
    joiner = "." if right else ""
    s = left + joiner + right
    digits = draw(st.integers(min_value=0, max_value=len(s)))
    return s, digits


@settings(max_examples=500)
@given(_number_and_digits())
def test_strip_trailing_digits_properties(case):
    s, digits = case
    stripped = strip_trailing_digits(s, digits)
    assert s.startswith(stripped)
    if "." in s:
        assert s.split(".")[0] == stripped.split(".")[0]
    else:
        assert stripped == s


def test_strip_trailing_digits_values():
    assert strip_trailing_digits("12.3456", 2) == "12.34"
    assert strip_trailing_digits("12.3456", 0) == "12"
    assert strip_trailing_digits("12.3456", 10) == "12.3456"
    assert strip_trailing_digits("1234", 2) == "1234"