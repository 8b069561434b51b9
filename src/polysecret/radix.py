# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Positional decoding of share values written in bases 2 through 16.

``decode`` evaluates the digit string right to left, accumulating
``digit * radix**position``. Two numeric representations are offered:

``exact``
    Python integers, no magnitude limit. This is the default.

``float``
    IEEE-754 binary64, built with a running power and a running sum. Values
    above ``2**53`` are rounded at every step, which is how fixed-width
    floating decoders lose the low digits of large shares.
"""

from __future__ import annotations

from typing import Literal, Union

from .errors import DigitOutOfRange, EmptyInput, InvalidCharacter, InvalidRadix

Precision = Literal["exact", "float"]
Number = Union[int, float]

MIN_RADIX = 2
MAX_RADIX = 16
PRECISIONS = ("exact", "float")


def digit_value(char: str) -> int:
    """Return the numeric value of one hexadecimal digit, ignoring case."""
    folded = char.lower()
    if "0" <= folded <= "9":
        return ord(folded) - ord("0")
    if "a" <= folded <= "f":
        return ord(folded) - ord("a") + 10
    raise InvalidCharacter(f"Invalid character {char!r} in number")


def decode(digits: str, radix: int, *, precision: Precision = "exact") -> Number:
    if radix < MIN_RADIX or radix > MAX_RADIX:
        raise InvalidRadix(f"Invalid base {radix}; expected {MIN_RADIX}..{MAX_RADIX}")
    if not digits:
        raise EmptyInput("Empty value")
    if precision not in PRECISIONS:
        raise ValueError(f"Unknown precision {precision!r}")

    if precision == "float":
        result: Number = 0.0
        power: Number = 1.0
    else:
        result = 0
        power = 1

    for char in reversed(digits):
        value = digit_value(char)
        if value >= radix:
            raise DigitOutOfRange(f"Digit {value} invalid for base {radix}")
        result += value * power
        power *= radix
    return result


__all__ = ["decode", "digit_value", "Precision", "PRECISIONS", "MIN_RADIX", "MAX_RADIX"]
