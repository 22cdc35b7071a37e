"""Evaluation and integer rescaling of exact coefficient vectors."""

from __future__ import annotations

import math
from collections.abc import Sequence

from polyrecon.models import Point
from polyrecon.rational import ZERO, Rational


def evaluate(coefficients: Sequence[Rational], x: int) -> Rational:
    """f(x) for coefficients a0..am, by Horner's rule."""
    result = ZERO
    for c in reversed(coefficients):
        result = result * x + c
    return result


def interpolates(coefficients: Sequence[Rational], points: Sequence[Point]) -> bool:
    """True iff f(x) == y exactly for every point."""
    return all(evaluate(coefficients, p.x) == p.y for p in points)


def common_denominator(coefficients: Sequence[Rational]) -> tuple[int, list[int]]:
    """LCM of the denominators and the coefficients scaled by it.

    ``lcm * f(x)`` then has the returned integer coefficients.
    """
    lcm = math.lcm(*(c.denominator for c in coefficients))
    scaled = [c.numerator * (lcm // c.denominator) for c in coefficients]
    return lcm, scaled
