# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Loading share-set documents into structured records.

A share set is a JSON object::

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"}
    }

Every entry other than ``keys`` is a share keyed by its decimal index.
Malformed entries are skipped with a warning instead of failing the whole
document; only the threshold block is mandatory.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping

from .errors import DecodeError, InvalidShareSet, InvalidThresholdParameters
from .lagrange import Point
from .radix import Precision, decode

_logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


@dataclass(frozen=True)
class Share:
    index: int
    digits: str
    radix: int


@dataclass(frozen=True)
class ThresholdParameters:
    n: int
    k: int


@dataclass(frozen=True)
class SkippedShare:
    key: str
    reason: str


def load_document(text: str) -> dict[str, Any]:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidShareSet(f"Share set is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise InvalidShareSet("Share set must be a JSON object")
    return document


def _is_ascii_decimal(text: str) -> bool:
    # str.isdecimal alone admits non-ASCII digits such as "١"
    return text.isascii() and text.isdecimal()


def _as_count(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _is_ascii_decimal(value):
        return int(value)
    return None


def read_threshold(document: Mapping[str, Any]) -> ThresholdParameters:
    """Validate the ``keys`` block before any share is decoded."""

    keys = document.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise InvalidThresholdParameters("Missing 'keys' object with n and k")
    n = _as_count(keys.get("n"))
    k = _as_count(keys.get("k"))
    if n is None or k is None or n <= 0 or k <= 0 or k > n:
        raise InvalidThresholdParameters(
            f"Invalid n={keys.get('n')!r} or k={keys.get('k')!r} (k must be <= n)"
        )
    return ThresholdParameters(n=n, k=k)


def _parse_share(key: str, body: Any) -> Share:
    if not _is_ascii_decimal(key):
        raise ValueError("key is not a decimal index")
    index = int(key)
    if index < 1:
        raise ValueError("index must be positive")
    if not isinstance(body, Mapping):
        raise ValueError("share entry is not an object")
    base = body.get("base")
    value = body.get("value")
    if not isinstance(base, str) or not base:
        raise ValueError("missing base")
    if not isinstance(value, str) or not value:
        raise ValueError("missing value")
    if not _is_ascii_decimal(base):
        raise ValueError(f"unparseable base {base!r}")
    return Share(index=index, digits=value, radix=int(base))


def iter_shares(document: Mapping[str, Any], skipped: list[SkippedShare] | None = None) -> Iterator[Share]:
    """Yield well-formed shares in ascending index order.

    Rejected entries are logged and, when ``skipped`` is given, appended to it.
    """

    shares: list[Share] = []
    for key, body in document.items():
        if key == KEYS_FIELD:
            continue
        try:
            shares.append(_parse_share(key, body))
        except ValueError as exc:
            _logger.warning("Skipping share %s - %s", key, exc)
            if skipped is not None:
                skipped.append(SkippedShare(key=key, reason=str(exc)))
    shares.sort(key=lambda share: share.index)
    return iter(shares)


def collect_points(
    shares: Iterable[Share],
    *,
    precision: Precision = "exact",
    skipped: list[SkippedShare] | None = None,
) -> list[Point]:
    """Decode shares into points, dropping the ones that fail to decode."""

    points: list[Point] = []
    for share in shares:
        try:
            y = decode(share.digits, share.radix, precision=precision)
        except DecodeError as exc:
            _logger.warning("Skipping point %d - %s: %s", share.index, exc.kind, exc)
            if skipped is not None:
                skipped.append(SkippedShare(key=str(share.index), reason=f"{exc.kind}: {exc}"))
            continue
        _logger.debug("Point %d: %r (base %d) = %s", share.index, share.digits, share.radix, y)
        points.append(Point(share.index, y))
    return points


__all__ = [
    "Share",
    "ThresholdParameters",
    "SkippedShare",
    "load_document",
    "read_threshold",
    "iter_shares",
    "collect_points",
]
