# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Lagrange interpolation over plain (non-modular) numbers.

The reconstructor evaluates the interpolating polynomial directly at the
target abscissa, without building a coefficient vector::

    P(t) = sum_i y_i * prod_{j != i} (t - x_j) / (x_i - x_j)

Rational inputs (``int``, ``Fraction``) are combined with
:class:`fractions.Fraction` and the result is exact. A single ``float``
anywhere in the input switches the whole computation to binary64.
"""

from __future__ import annotations

import numbers
from fractions import Fraction
from typing import NamedTuple, Sequence, Union

from .errors import DuplicateAbscissa, InsufficientPoints, UnstableInterpolation

Number = Union[int, float, Fraction]

DEFAULT_TOLERANCE = 1e-15


class Point(NamedTuple):
    x: int
    y: Number


def _is_exact(value: object) -> bool:
    return isinstance(value, numbers.Rational)


def _check_abscissas(points: Sequence[Point], k: int) -> None:
    for i in range(k):
        for j in range(i + 1, k):
            if points[i][0] == points[j][0]:
                raise DuplicateAbscissa(f"Duplicate x values found: {points[i][0]}")


def interpolate(
    points: Sequence[Point],
    k: int,
    evaluate_at: Number = 0,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Number:
    """Evaluate the polynomial through the first ``k`` points at ``evaluate_at``.

    Points past index ``k`` are ignored entirely, including for the
    duplicate check.
    """
    if k <= 0 or k > len(points):
        raise InsufficientPoints(f"Invalid k value: {k} (have {len(points)} points)")

    used = list(points[:k])
    _check_abscissas(used, k)

    exact = _is_exact(evaluate_at) and all(_is_exact(x) and _is_exact(y) for x, y in used)
    if exact:
        target: Number = Fraction(evaluate_at)
        total: Number = Fraction(0)
    else:
        target = float(evaluate_at)
        total = 0.0

    for i, (xi, yi) in enumerate(used):
        term = Fraction(yi) if exact else float(yi)
        for j, (xj, _) in enumerate(used):
            if i == j:
                continue
            denominator = xi - xj if exact else float(xi - xj)
            if abs(denominator) < tolerance:
                raise UnstableInterpolation("Points too close together for stable interpolation")
            term *= (target - xj) / denominator
        total += term

    if exact and total.denominator == 1:
        return int(total)
    return total


def reconstruct(points: Sequence[Point], k: int, *, tolerance: float = DEFAULT_TOLERANCE) -> Number:
    """Recover the constant term, i.e. the polynomial's value at ``x = 0``."""
    return interpolate(points, k, 0, tolerance=tolerance)


__all__ = ["Point", "interpolate", "reconstruct", "DEFAULT_TOLERANCE"]
