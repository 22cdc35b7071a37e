"""Shared test fixtures for the polyrecon test suite."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

import pytest

from polyrecon.models import Point


@pytest.fixture
def quadratic_points() -> list[Point]:
    """(1, "1c" base 16), (2, "111" base 2), (3, "12" base 10) decoded.

    Interpolant: f(x) = 75 - 60x + 13x^2.
    """
    return [Point(1, 28), Point(2, 7), Point(3, 12)]


@pytest.fixture
def line_points() -> list[Point]:
    """f(x) = 2x + 2."""
    return [Point(1, 4), Point(2, 6)]


@pytest.fixture
def triangular_points() -> list[Point]:
    """f(x) = x/2 + x^2/2, whose coefficients are not integers."""
    return [Point(1, 1), Point(2, 3), Point(3, 6)]


@pytest.fixture
def sample_input() -> dict[str, Any]:
    """Four shares of f(x) = x^2 + 3 with threshold 3."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def unlimited_int_digits() -> Iterator[None]:
    """Lift the int <-> str digit limit for the test, restoring it afterwards."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    yield
    sys.set_int_max_str_digits(previous)
