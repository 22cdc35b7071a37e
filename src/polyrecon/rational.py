"""Reduced fractions over arbitrary-precision integers.

Values are always stored in lowest terms with a positive denominator, so
two equal rationals have identical (numerator, denominator) pairs.
"""

from __future__ import annotations

import math

from polyrecon.errors import DivideByZero, InvalidFraction, InverseOfZero


def _check_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


class Rational:
    """Immutable fraction n/d with gcd(|n|, d) = 1 and d > 0.

    Args:
        numerator: Signed integer numerator.
        denominator: Non-zero integer denominator (default 1).

    Raises:
        InvalidFraction: If denominator is zero.
    """

    __slots__ = ("_n", "_d")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        n = _check_int(numerator, "numerator")
        d = _check_int(denominator, "denominator")
        if d == 0:
            raise InvalidFraction(f"Zero denominator in {n}/0")
        if d < 0:
            n, d = -n, -d
        g = math.gcd(n, d)
        object.__setattr__(self, "_n", n // g)
        object.__setattr__(self, "_d", d // g)

    @classmethod
    def from_int(cls, value: int) -> Rational:
        return cls(value, 1)

    @property
    def numerator(self) -> int:
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    @property
    def is_zero(self) -> bool:
        return self._n == 0

    @property
    def is_integer(self) -> bool:
        return self._d == 1

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- arithmetic -------------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> Rational | None:
        if isinstance(other, Rational):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Rational(other)
        return None

    def __add__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._n * o._d + o._n * self._d, self._d * o._d)

    __radd__ = __add__

    def __sub__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._n * o._d - o._n * self._d, self._d * o._d)

    def __rsub__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._n * o._n, self._d * o._d)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if o._n == 0:
            raise DivideByZero(f"Cannot divide {self} by zero")
        return Rational(self._n * o._d, self._d * o._n)

    def __rtruediv__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __neg__(self) -> Rational:
        return Rational(-self._n, self._d)

    def __abs__(self) -> Rational:
        return Rational(abs(self._n), self._d)

    def invert(self) -> Rational:
        """Multiplicative inverse d/n."""
        if self._n == 0:
            raise InverseOfZero("Inverse of zero")
        return Rational(self._d, self._n)

    # --- comparison and conversion -----------------------------------------

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._n == o._n and self._d == o._d

    def __hash__(self) -> int:
        if self._d == 1:
            return hash(self._n)
        return hash((self._n, self._d))

    def __bool__(self) -> bool:
        return self._n != 0

    def __float__(self) -> float:
        return self._n / self._d

    def __str__(self) -> str:
        if self._d == 1:
            return str(self._n)
        return f"{self._n}/{self._d}"

    def __repr__(self) -> str:
        return f"Rational({self._n}, {self._d})"


ZERO = Rational(0)
ONE = Rational(1)
