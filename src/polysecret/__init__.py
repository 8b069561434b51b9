# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Recover the constant term of a polynomial from mixed-base share points.

``decode``
    Turn a digit string in base 2..16 into an integer.

``interpolate`` / ``reconstruct``
    Lagrange interpolation over plain rational numbers.

``solve``
    Run the whole pipeline over a share-set document.
"""

from __future__ import annotations

from .errors import (
    DecodeError,
    DigitOutOfRange,
    DuplicateAbscissa,
    EmptyInput,
    InsufficientPoints,
    InvalidCharacter,
    InvalidRadix,
    InvalidShareSet,
    InvalidThresholdParameters,
    ReconstructionError,
    SecretOverflow,
    UnstableInterpolation,
)
from .lagrange import Point, interpolate, reconstruct
from .radix import decode
from .shareset import Share, ThresholdParameters
from .solver import Solution, solve, solve_file, solve_text, to_secret

__version__ = "0.1.0"

__all__ = [
    "decode",
    "interpolate",
    "reconstruct",
    "solve",
    "solve_text",
    "solve_file",
    "to_secret",
    "Point",
    "Share",
    "ThresholdParameters",
    "Solution",
    "ReconstructionError",
    "DecodeError",
    "InvalidRadix",
    "EmptyInput",
    "InvalidCharacter",
    "DigitOutOfRange",
    "InsufficientPoints",
    "DuplicateAbscissa",
    "UnstableInterpolation",
    "InvalidThresholdParameters",
    "InvalidShareSet",
    "SecretOverflow",
]
