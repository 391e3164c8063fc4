import math

import pytest

from neural.vector import LengthMismatchError, dot, format_scalar, format_values


@pytest.mark.parametrize(
    "a,b",
    [
        ([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]),
        ([0.5, -0.5], [1.0, 2.0]),
        ([-1.0], [4.0]),
        ([0.25, 0.75, -0.1, 0.3], [3.5, -2.0, 1.0, 0.0]),
    ],
)
def test_dot_matches_elementwise_sum(a, b):
    assert dot(a, b) == pytest.approx(sum(x * y for x, y in zip(a, b)))


def test_dot_empty_is_zero():
    assert dot([], []) == 0.0


def test_dot_accepts_tuples():
    assert dot((1.0, 2.0), (3.0, 4.0)) == pytest.approx(11.0)


@pytest.mark.parametrize("a,b", [([1.0], []), ([], [1.0]), ([1.0, 2.0], [1.0])])
def test_dot_length_mismatch_fails_fast(a, b):
    with pytest.raises(LengthMismatchError):
        dot(a, b)


def test_length_mismatch_is_an_assertion_error():
    with pytest.raises(AssertionError):
        dot([1.0, 2.0], [1.0, 2.0, 3.0])


@pytest.mark.parametrize(
    "x,expected",
    [
        (0.0, "0"),
        (-0.0, "-0"),
        (1.0, "1"),
        (-1.0, "-1"),
        (0.5, "0.5"),
        (-0.25, "-0.25"),
        (1e-7, "0.0000001"),
        (1e20, "100000000000000000000"),
        (1e23, "1" + "0" * 23),
        (100.0, "100"),
        (0.1, "0.1"),
        (math.nan, "NaN"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
    ],
)
def test_format_scalar(x, expected):
    assert format_scalar(x) == expected


def test_format_values():
    assert format_values([]) == "{}"
    assert format_values([1.0]) == "{1}"
    assert format_values([1.0, -1.0, 0.5]) == "{1, -1, 0.5}"


def test_large_whole_number_uses_shortest_digits():
    # 1e23 is not exactly representable; render the shortest digits, not the binary value
    assert format_values([1e23, 2.0]) == "{100000000000000000000000, 2}"
