"""Tests for polyrecon.polynomial module."""

from __future__ import annotations

from polyrecon.models import Point
from polyrecon.polynomial import common_denominator, evaluate, interpolates
from polyrecon.rational import Rational


class TestEvaluate:
    def test_horner(self):
        coeffs = [Rational(1), Rational(2), Rational(3)]
        assert evaluate(coeffs, 0) == 1
        assert evaluate(coeffs, 1) == 6
        assert evaluate(coeffs, 2) == 17

    def test_fractional(self):
        coeffs = [Rational(0), Rational(1, 2), Rational(1, 2)]
        assert evaluate(coeffs, 4) == 10

    def test_empty_is_zero(self):
        assert evaluate([], 5) == 0


class TestInterpolates:
    def test_true(self, line_points: list[Point]):
        assert interpolates([Rational(2), Rational(2)], line_points)

    def test_false(self, line_points: list[Point]):
        assert not interpolates([Rational(2), Rational(3)], line_points)


class TestCommonDenominator:
    def test_integer_coefficients(self):
        assert common_denominator([Rational(2), Rational(2)]) == (1, [2, 2])

    def test_fractional_coefficients(self):
        coeffs = [Rational(0), Rational(1, 2), Rational(1, 2)]
        assert common_denominator(coeffs) == (2, [0, 1, 1])

    def test_lcm_not_product(self):
        coeffs = [Rational(1, 4), Rational(-1, 6), Rational(5)]
        assert common_denominator(coeffs) == (12, [3, -2, 60])

    def test_empty(self):
        assert common_denominator([]) == (1, [])
