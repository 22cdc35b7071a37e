"""Base-b digit strings (2 <= b <= 36) to arbitrary-precision integers.

Digits are '0'-'9' followed by 'a'-'z' (case-insensitive), so base 36 uses
the full alphanumeric set.
"""

from __future__ import annotations

import string

from polyrecon.errors import DigitOutOfRange, InvalidDigit, InvalidInput

MIN_BASE = 2
MAX_BASE = 36

_ALPHABET = string.digits + string.ascii_lowercase
_DIGIT_VALUES = {ch: i for i, ch in enumerate(_ALPHABET)}
_DIGIT_VALUES.update({ch.upper(): i for ch, i in _DIGIT_VALUES.items() if ch.isalpha()})


def decode_digit(ch: str) -> int:
    """Value of a single digit character, 0..35."""
    try:
        return _DIGIT_VALUES[ch]
    except KeyError:
        raise InvalidDigit(f"Invalid digit {ch!r}") from None


def decode(digits: str, base: int) -> int:
    """Decode a digit string in the given base.

    Surrounding whitespace is ignored and an empty string decodes to 0.
    The caller guarantees 2 <= base <= 36.

    Raises:
        InvalidDigit: On a character outside [0-9a-zA-Z].
        DigitOutOfRange: On a digit whose value is >= base.
    """
    value = 0
    for ch in digits.strip():
        d = decode_digit(ch)
        if d >= base:
            raise DigitOutOfRange(f"Digit {ch!r} not valid for base {base}")
        value = value * base + d
    return value


def encode(value: int, base: int) -> str:
    """Canonical lowercase base-b representation of a non-negative integer."""
    if value < 0:
        raise InvalidInput(f"Cannot encode negative value {value}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidInput(f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    if value == 0:
        return "0"

    out = []
    while value:
        value, d = divmod(value, base)
        out.append(_ALPHABET[d])
    return "".join(reversed(out))
