"""Exception hierarchy for reconstruction failures.

Every failure is fatal to the computation that raised it: arithmetic is
exact, so there is nothing to retry or approximate.
"""

from __future__ import annotations


class ReconstructionError(ValueError):
    """Base class for all errors raised by polyrecon."""


class InvalidFraction(ReconstructionError):
    """A rational number was constructed with a zero denominator."""


class DivideByZero(ReconstructionError, ZeroDivisionError):
    """Division by a rational whose numerator is zero."""


class InverseOfZero(ReconstructionError, ZeroDivisionError):
    """Multiplicative inverse of zero was requested."""


class InvalidDigit(ReconstructionError):
    """A character outside [0-9a-zA-Z] appeared in a digit string."""


class DigitOutOfRange(ReconstructionError):
    """A digit's value is not smaller than the stated base."""


class SingularSystem(ReconstructionError):
    """The selected points do not determine a unique polynomial.

    Raised when two selected x-values coincide, or when fewer distinct
    x-values are available than the threshold requires.
    """


class InvalidInput(ReconstructionError):
    """Input violates a precondition (base range, threshold, structure)."""


class InconsistentResult(ReconstructionError):
    """The two reconstruction algorithms disagree on the same points."""
