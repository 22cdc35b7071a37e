"""Direct evaluation of the interpolating polynomial at x = 0."""

from __future__ import annotations

from collections.abc import Sequence

from polyrecon.errors import SingularSystem
from polyrecon.models import Point
from polyrecon.rational import ONE, ZERO, Rational


def evaluate_at_zero(points: Sequence[Point]) -> Rational:
    """Lagrange interpolation evaluated at x = 0.

    For points (x_i, y_i), the Lagrange basis polynomial at x=0 is:
        L_i(0) = prod_{j != i} (0 - x_j) / (x_i - x_j)
               = prod_{j != i} (-x_j) / (x_i - x_j)

    The interpolated value at 0 is sum_i y_i * L_i(0). The full coefficient
    vector is never built.

    Raises:
        SingularSystem: If two points share an x-value.
    """
    xs = [p.x for p in points]
    if len(set(xs)) != len(xs):
        raise SingularSystem("Duplicate evaluation points, no unique solution")

    k = len(points)
    secret = ZERO

    for i in range(k):
        xi, yi = points[i].x, points[i].y
        numerator = ONE
        denominator = ONE
        for j in range(k):
            if i == j:
                continue
            xj = points[j].x
            numerator = numerator * Rational(-xj)
            denominator = denominator * Rational(xi - xj)

        secret = secret + Rational(yi) * (numerator / denominator)

    return secret
