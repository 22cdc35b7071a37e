#!/usr/bin/env python3
"""Quick start example: recover a secret from mixed-base shares.

Demonstrates the core workflow:
  1. Decode shares given as digit strings in different bases
  2. Solve for every polynomial coefficient (Gauss-Jordan)
  3. Evaluate f(0) directly (Lagrange) and check both agree
  4. Rescale the coefficients to integers
"""

from polyrecon.digits import encode
from polyrecon.lagrange import evaluate_at_zero
from polyrecon.polynomial import common_denominator, evaluate
from polyrecon.rational import Rational
from polyrecon.reconstruction import Reconstructor, decode_shares, format_report
from polyrecon.vandermonde import solve_coefficients

# --- 1. Shares of f(x) = 75 - 60x + 13x^2, each in its own base ---
shares = [(1, 16, "1c"), (2, 2, "111"), (3, 10, "12"), (6, 36, "53")]
points = decode_shares(shares)
print("Decoded points:", [(p.x, p.y) for p in points])

# --- 2. All coefficients from the first three points ---
coeffs = solve_coefficients(points[:3])
print("Coefficients:", [str(c) for c in coeffs])

# --- 3. f(0) without the full coefficient vector ---
secret = evaluate_at_zero(points[:3])
print(f"f(0) = {secret}  (a0 = {coeffs[0]})")
assert secret == coeffs[0]

# --- 4. A polynomial with fractional coefficients ---
g = [Rational(1), Rational(1, 2), Rational(1, 2)]  # 1 + x(x+1)/2
frac_shares = [(x, 7, encode(evaluate(g, x).numerator, 7)) for x in (1, 2, 5)]
result = Reconstructor().reconstruct_encoded(frac_shares, k=3)
lcm, scaled = common_denominator(result.coefficients or [])
print(f"\nShares in base 7: {frac_shares}")
print(format_report(result))
print(f"lcm * f(x) coefficients: {scaled} (lcm = {lcm})")
