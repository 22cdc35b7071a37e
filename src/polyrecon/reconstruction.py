"""End-to-end reconstruction: parse shares, select k points, solve, report.

Input is a mapping of share index to ``{"base": ..., "value": ...}`` plus a
``keys`` entry carrying ``{"n": ..., "k": ...}``.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum, auto
from typing import Any

from polyrecon.errors import InconsistentResult, InvalidInput
from polyrecon.lagrange import evaluate_at_zero
from polyrecon.models import EncodedShare, Point, ReconstructionResult, Threshold
from polyrecon.polynomial import common_denominator, interpolates
from polyrecon.rational import Rational
from polyrecon.vandermonde import solve_coefficients

logger = logging.getLogger(__name__)

KEYS_ENTRY = "keys"

_DECIMAL = re.compile(r"[+-]?[0-9]+")

ShareLike = EncodedShare | tuple[int, int, str]


class Method(Enum):
    BOTH = auto()
    VANDERMONDE = auto()
    LAGRANGE = auto()


def _parse_int(value: Any, what: str) -> int:
    """Accept an int or a string of ASCII decimal digits with optional sign."""
    if isinstance(value, bool):
        raise InvalidInput(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DECIMAL.fullmatch(value.strip()):
        return int(value.strip(), 10)
    raise InvalidInput(f"{what} must be an integer, got {value!r}")


def load_input(text: str) -> dict[str, Any]:
    """Parse the JSON share document."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"Malformed JSON input: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidInput("Input must be a JSON object")
    return data


def parse_input(data: Mapping[str, Any]) -> tuple[Threshold, list[EncodedShare]]:
    """Split an input mapping into its threshold and encoded shares."""
    keys = data.get(KEYS_ENTRY)
    if not isinstance(keys, Mapping) or "n" not in keys or "k" not in keys:
        raise InvalidInput(f"Missing {KEYS_ENTRY!r} entry with 'n' and 'k'")
    threshold = Threshold(
        n=_parse_int(keys["n"], "keys.n"),
        k=_parse_int(keys["k"], "keys.k"),
    )

    shares = []
    for key, entry in data.items():
        if key == KEYS_ENTRY:
            continue
        x = _parse_int(key, "Share index")
        if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
            raise InvalidInput(f"Share {key!r} needs 'base' and 'value'")
        value = entry["value"]
        if not isinstance(value, str):
            raise InvalidInput(f"Share {key!r} value must be a string, got {value!r}")
        base = _parse_int(entry["base"], f"Share {key!r} base")
        shares.append(EncodedShare(x=x, base=base, value=value))

    if len(shares) != threshold.n:
        logger.warning("keys.n is %d but %d shares were supplied", threshold.n, len(shares))

    return threshold, shares


def decode_shares(shares: Iterable[ShareLike]) -> list[Point]:
    """Decode every share's digit string into a Point."""
    points = []
    for share in shares:
        if not isinstance(share, EncodedShare):
            x, base, value = share
            share = EncodedShare(x=x, base=base, value=value)
        points.append(share.decode())
    return points


def select_points(points: Sequence[Point], k: int) -> list[Point]:
    """Sort by x ascending and take the first k."""
    if k < 1:
        raise InvalidInput(f"Threshold k must be >= 1, got {k}")
    if k > len(points):
        raise InvalidInput(f"Threshold k={k} exceeds the {len(points)} shares supplied")
    return sorted(points, key=lambda p: p.x)[:k]


class Reconstructor:
    """Recovers the polynomial and its value at zero from k shares.

    Args:
        method: Which algorithm(s) to run. BOTH solves for every
            coefficient and also evaluates f(0) directly.
        verify: Re-substitute the points into the solved polynomial and
            check the two algorithms agree on f(0).
    """

    def __init__(self, method: Method = Method.BOTH, verify: bool = True) -> None:
        self.method = method
        self.verify = verify

    def reconstruct(self, points: Sequence[Point], k: int) -> ReconstructionResult:
        selected = select_points(points, k)
        logger.debug("Selected x-values %s", [p.x for p in selected])

        result = ReconstructionResult(degree=k - 1, points=selected)

        if self.method in (Method.BOTH, Method.VANDERMONDE):
            coeffs = solve_coefficients(selected)
            result.coefficients = coeffs
            result.common_denominator, result.integer_coefficients = common_denominator(coeffs)

        if self.method in (Method.BOTH, Method.LAGRANGE):
            result.secret = evaluate_at_zero(selected)

        if self.verify:
            self._check(result)

        return result

    def reconstruct_encoded(self, shares: Iterable[ShareLike], k: int) -> ReconstructionResult:
        """Decode (x, base, digits) shares, then reconstruct from the first k by x."""
        return self.reconstruct(decode_shares(shares), k)

    def reconstruct_input(self, data: Mapping[str, Any]) -> ReconstructionResult:
        threshold, shares = parse_input(data)
        return self.reconstruct_encoded(shares, threshold.k)

    @staticmethod
    def _check(result: ReconstructionResult) -> None:
        coeffs = result.coefficients
        if coeffs is not None and not interpolates(coeffs, result.points):
            raise InconsistentResult("Solved coefficients do not reproduce the input points")
        if coeffs and result.secret is not None and coeffs[0] != result.secret:
            raise InconsistentResult(
                f"a0 = {coeffs[0]} but Lagrange evaluation gives f(0) = {result.secret}"
            )


def reconstruct_secret(shares: Iterable[ShareLike], k: int) -> Rational:
    """Convenience: f(0) from the first k shares by x, via Lagrange only."""
    return Reconstructor(method=Method.LAGRANGE).reconstruct_encoded(shares, k).secret_value


def format_report(result: ReconstructionResult) -> str:
    """Human-readable report of a reconstruction.

    Values longer than the interpreter's int string conversion limit (4300
    digits by default) need ``sys.set_int_max_str_digits(0)`` first; the
    command-line entry point does this.
    """
    lines = [f"degree: {result.degree}"]

    if result.coefficients is not None:
        lines.append(f"coefficients a0..a{result.degree} (reduced fractions):")
        lines.extend(f"a{i} = {c}" for i, c in enumerate(result.coefficients))

    lines.append(f"f(0) = {result.secret_value}")

    if result.integer_coefficients is not None:
        lines.append(f"common_denominator = {result.common_denominator}")
        lines.append("integer_coeffs_for_(common_denominator * f(x)) = [")
        lines.append(",\n".join(f"  {s}" for s in result.integer_coefficients))
        lines.append("]")

    return "\n".join(lines)


def result_to_dict(result: ReconstructionResult) -> dict[str, Any]:
    """JSON-friendly form; integers and fractions are rendered as strings.

    The same int string conversion limit as ``format_report`` applies.
    """
    out: dict[str, Any] = {
        "degree": result.degree,
        "points": [{"x": str(p.x), "y": str(p.y)} for p in result.points],
        "secret": str(result.secret_value),
    }
    if result.coefficients is not None:
        out["coefficients"] = [str(c) for c in result.coefficients]
        out["common_denominator"] = str(result.common_denominator)
        out["integer_coefficients"] = [str(s) for s in result.integer_coefficients or []]
    return out
