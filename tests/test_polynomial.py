"""
Tests for polynomial construction, evaluation and interpolation.
"""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir256.errors import FieldDivisionByZero
from shamir256.field import add, mult
from shamir256.polynomial import (
    evaluate_polynomial,
    interpolate_polynomial,
    make_polynomial,
)


def test_make_polynomial():
    coefficients = make_polynomial(42, 2)
    assert coefficients[0] == 42
    assert len(coefficients) == 3
    assert all(0 <= c <= 255 for c in coefficients)


def test_make_polynomial_seeded():
    """Same seed, same coefficients."""
    first = make_polynomial(7, 4, rng=random.Random(3))
    second = make_polynomial(7, 4, rng=random.Random(3))
    assert first == second


def test_evaluate_at_zero_is_intercept():
    for degree in (0, 1, 2, 10, 254):
        coefficients = make_polynomial(42, degree)
        assert evaluate_polynomial(coefficients, 0) == 42


def test_evaluate_linear():
    coefficients = make_polynomial(42, 1)
    expected = add(42, mult(1, coefficients[1]))
    assert evaluate_polynomial(coefficients, 1) == expected


def test_evaluate_matches_power_sum():
    """Horner's method agrees with summing c_i * x^i."""
    coefficients = [0x53, 0x01, 0xCA, 0x10]
    for x in (1, 2, 3, 0x80, 255):
        expected = 0
        power = 1
        for c in coefficients:
            expected = add(expected, mult(c, power))
            power = mult(power, x)
        assert evaluate_polynomial(coefficients, x) == expected


def test_interpolate_rand():
    """Every intercept survives evaluate-then-interpolate at x = 1, 2, 3."""
    x_vals = [1, 2, 3]
    for i in range(256):
        coefficients = make_polynomial(i, 2)
        y_vals = [evaluate_polynomial(coefficients, x) for x in x_vals]
        assert interpolate_polynomial(x_vals, y_vals, 0) == i


def test_interpolate_arbitrary_point():
    """Interpolation recovers the polynomial away from the origin too."""
    rng = random.Random(11)
    coefficients = make_polynomial(99, 3, rng=rng)
    x_vals = [17, 200, 5, 64]
    y_vals = [evaluate_polynomial(coefficients, x) for x in x_vals]
    for x in (0, 1, 42, 255):
        assert interpolate_polynomial(x_vals, y_vals, x) == evaluate_polynomial(coefficients, x)


def test_interpolate_duplicate_x():
    with pytest.raises(FieldDivisionByZero):
        interpolate_polynomial([1, 1], [5, 6], 0)
