# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Reconstruct a secret from a whole share-set document.

Pipeline: threshold validation, share extraction, per-share decoding (bad
shares are dropped), selection of the first ``k`` points in index order,
Lagrange evaluation at zero, and rounding to an integer secret.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path
from typing import Any, Mapping, Optional

from . import policy
from .errors import InsufficientPoints, InvalidShareSet, SecretOverflow
from .lagrange import Number, Point, reconstruct
from .shareset import (
    KEYS_FIELD,
    SkippedShare,
    ThresholdParameters,
    collect_points,
    iter_shares,
    load_document,
    read_threshold,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    threshold: ThresholdParameters
    points: tuple[Point, ...]
    used: tuple[Point, ...]
    skipped: tuple[SkippedShare, ...]
    value: Number
    secret: int


def round_half_away(value: Number) -> int:
    """Round to the nearest integer, ties away from zero."""
    if isinstance(value, int):
        return value
    exact = Fraction(value)
    magnitude = math.floor(abs(exact) + Fraction(1, 2))
    return magnitude if exact >= 0 else -magnitude


def to_secret(value: Number, *, bits: Optional[int] = 64) -> int:
    """Round ``value`` and check that it fits a signed ``bits``-wide integer.

    Raises :class:`SecretOverflow` instead of returning a placeholder when
    the value cannot be represented. ``bits`` of ``None`` or ``<= 0`` means
    unbounded.
    """
    if bits is not None and bits <= 0:
        bits = None
    if isinstance(value, float) and not math.isfinite(value):
        raise SecretOverflow(f"Secret {value} is not a finite number", value=value, bits=bits)
    secret = round_half_away(value)
    if bits is not None:
        limit = 1 << (bits - 1)
        if not -limit <= secret < limit:
            raise SecretOverflow(
                f"Secret {secret} exceeds the signed {bits}-bit range", value=value, bits=bits
            )
    return secret


def solve(document: Mapping[str, Any], *, settings: Optional[policy.Settings] = None) -> Solution:
    settings = settings or policy.settings
    threshold = read_threshold(document)
    _logger.info("Input: n=%d shares, k=%d required", threshold.n, threshold.k)

    entries = sum(1 for key in document if key != KEYS_FIELD)
    if entries != threshold.n:
        _logger.warning("Declared n=%d but the document holds %d share entries", threshold.n, entries)

    skipped: list[SkippedShare] = []
    shares = []
    for share in iter_shares(document, skipped):
        # only shares "1".."n" take part in the threshold
        if share.index > threshold.n:
            _logger.warning("Skipping share %d - index exceeds n=%d", share.index, threshold.n)
            skipped.append(SkippedShare(key=str(share.index), reason="index exceeds n"))
            continue
        shares.append(share)
    points = collect_points(shares, precision=settings.precision, skipped=skipped)
    if len(points) < threshold.k:
        raise InsufficientPoints(
            f"Not enough valid points ({len(points)} found, {threshold.k} required)"
        )

    used = points[: threshold.k]
    _logger.debug("Interpolating over x = %s", [x for x, _ in used])
    value = reconstruct(used, threshold.k, tolerance=settings.tolerance)
    secret = to_secret(value, bits=settings.secret_bits)
    _logger.info("Secret (constant term): %s", secret)
    return Solution(
        threshold=threshold,
        points=tuple(points),
        used=tuple(used),
        skipped=tuple(skipped),
        value=value,
        secret=secret,
    )


def solve_text(text: str, *, settings: Optional[policy.Settings] = None) -> Solution:
    return solve(load_document(text), settings=settings)


def solve_file(path: str | Path, *, settings: Optional[policy.Settings] = None) -> Solution:
    return solve_text(read_share_text(Path(path).read_bytes()), settings=settings)


def read_share_text(raw: bytes) -> str:
    """Decode a share-set document; it must be UTF-8."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidShareSet(f"Share set is not valid UTF-8: {exc}") from exc


__all__ = [
    "Solution",
    "round_half_away",
    "to_secret",
    "solve",
    "solve_text",
    "solve_file",
    "read_share_text",
]
