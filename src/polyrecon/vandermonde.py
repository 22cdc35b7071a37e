"""Monomial coefficients via Gauss-Jordan elimination on a Vandermonde system.

For k points with distinct x-values, the system

    sum_j a_j * x_i^j = y_i        (i, j = 0..k-1)

has exactly one solution. Entries are held in numpy object arrays of
Rational, so every step is exact.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from polyrecon.errors import SingularSystem
from polyrecon.models import Point
from polyrecon.rational import Rational

logger = logging.getLogger(__name__)

_to_rational = np.frompyfunc(Rational.from_int, 1, 1)


def vandermonde_matrix(xs: Sequence[int]) -> np.ndarray:
    """k x k matrix with A[i, j] = xs[i] ** j, as Python ints."""
    return np.vander(np.array(list(xs), dtype=object), len(xs), increasing=True)


def _find_pivot(A: np.ndarray, col: int) -> int | None:
    """First row at or below col with a non-zero entry in col."""
    for row in range(col, A.shape[0]):
        if not A[row, col].is_zero:
            return row
    return None


def solve_coefficients(points: Sequence[Point]) -> list[Rational]:
    """Solve for a0..a(k-1) such that f(x_i) = y_i for every point.

    Args:
        points: k points with pairwise distinct x-values.

    Returns:
        Coefficients in increasing degree order.

    Raises:
        SingularSystem: If some column has no non-zero pivot, i.e. two
            x-values coincide.
    """
    k = len(points)
    if k == 0:
        return []

    A = _to_rational(vandermonde_matrix([p.x for p in points]))
    b = _to_rational(np.array([p.y for p in points], dtype=object))

    for col in range(k):
        pivot = _find_pivot(A, col)
        if pivot is None:
            raise SingularSystem(
                f"Singular system: no pivot in column {col}, x-values are not distinct"
            )
        if pivot != col:
            logger.debug("Swapping rows %d and %d", col, pivot)
            A[[col, pivot]] = A[[pivot, col]]
            b[[col, pivot]] = b[[pivot, col]]

        inv = A[col, col].invert()
        A[col, col:] = A[col, col:] * inv
        b[col] = b[col] * inv

        for row in range(k):
            if row == col:
                continue
            factor = A[row, col]
            if factor.is_zero:
                continue
            A[row, col:] = A[row, col:] - A[col, col:] * factor
            b[row] = b[row] - b[col] * factor

    return list(b)
