"""Data models for shares, thresholds and reconstruction results."""

from __future__ import annotations

from dataclasses import dataclass

from polyrecon.digits import MAX_BASE, MIN_BASE, decode
from polyrecon.errors import InvalidInput
from polyrecon.rational import Rational


@dataclass(frozen=True)
class Point:
    """A decoded share (x, y) with x the share index."""

    x: int
    y: int


@dataclass(frozen=True)
class EncodedShare:
    """A share as supplied: index, base, and the y-value's digit string."""

    x: int
    base: int
    value: str

    def __post_init__(self) -> None:
        if not MIN_BASE <= self.base <= MAX_BASE:
            raise InvalidInput(
                f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {self.base} for share {self.x}"
            )

    def decode(self) -> Point:
        return Point(x=self.x, y=decode(self.value, self.base))


@dataclass(frozen=True)
class Threshold:
    """The ``keys`` entry: n shares provided, k needed."""

    n: int
    k: int

    def __post_init__(self) -> None:
        if self.n < 1:
            raise InvalidInput(f"n must be >= 1, got {self.n}")
        if self.k < 1:
            raise InvalidInput(f"k must be >= 1, got {self.k}")

    @property
    def degree(self) -> int:
        return self.k - 1


@dataclass
class ReconstructionResult:
    """Outcome of reconstructing a polynomial from k points.

    Attributes:
        degree: Polynomial degree, k - 1.
        points: The k points used, sorted by x.
        coefficients: a0..a(k-1) from the Vandermonde solve, or None.
        secret: f(0) from Lagrange evaluation, or None.
        common_denominator: LCM of all coefficient denominators.
        integer_coefficients: coefficients scaled by common_denominator.
    """

    degree: int
    points: list[Point]
    coefficients: list[Rational] | None = None
    secret: Rational | None = None
    common_denominator: int | None = None
    integer_coefficients: list[int] | None = None

    @property
    def secret_value(self) -> Rational:
        """f(0), from whichever algorithm ran."""
        if self.secret is not None:
            return self.secret
        if self.coefficients:
            return self.coefficients[0]
        raise InvalidInput("Result carries neither coefficients nor a secret")

    @property
    def is_integral(self) -> bool:
        return self.secret_value.is_integer
