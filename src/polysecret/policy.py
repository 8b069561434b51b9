# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Runtime configuration for reconstruction.

Values come from environment variables so that batch jobs can switch the
arithmetic mode without code changes. Unparseable values fall back to the
defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .lagrange import DEFAULT_TOLERANCE
from .radix import PRECISIONS


def _load_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = os.environ.get(name, "").strip().lower()
    return value if value in choices else default


@dataclass(frozen=True)
class Settings:
    """Tunables shared by the solver and the command line."""

    precision: str = "exact"
    # Signed width of the reported secret; None disables the overflow check.
    secret_bits: Optional[int] = 64
    tolerance: float = DEFAULT_TOLERANCE


def load_settings() -> Settings:
    """Load settings considering environment overrides."""

    bits = _load_int("POLYSECRET_SECRET_BITS", 64)
    return Settings(
        precision=_load_choice("POLYSECRET_PRECISION", "exact", PRECISIONS),
        secret_bits=bits if bits > 0 else None,
        tolerance=_load_float("POLYSECRET_TOLERANCE", DEFAULT_TOLERANCE),
    )


settings = load_settings()


__all__ = ["Settings", "settings", "load_settings"]
