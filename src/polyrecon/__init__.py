"""Exact polynomial reconstruction from mixed-base threshold shares.

Recovers the interpolating polynomial of k shares, and its value at x = 0
(the shared secret), using reduced fractions over arbitrary-precision
integers.
"""

__version__ = "0.1.0"
