# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Failure kinds raised while decoding shares and reconstructing secrets."""

from __future__ import annotations


class ReconstructionError(ValueError):
    """Base class for every failure the library reports."""

    kind = "ReconstructionError"


class DecodeError(ReconstructionError):
    """A single share value could not be decoded."""

    kind = "DecodeError"


class InvalidRadix(DecodeError):
    kind = "InvalidRadix"


class EmptyInput(DecodeError):
    kind = "EmptyInput"


class InvalidCharacter(DecodeError):
    kind = "InvalidCharacter"


class DigitOutOfRange(DecodeError):
    kind = "DigitOutOfRange"


class InsufficientPoints(ReconstructionError):
    kind = "InsufficientPoints"


class DuplicateAbscissa(ReconstructionError):
    kind = "DuplicateAbscissa"


class UnstableInterpolation(ReconstructionError):
    """A Lagrange denominator collapsed below the stability tolerance."""

    kind = "UnstableInterpolation"


class InvalidThresholdParameters(ReconstructionError):
    kind = "InvalidThresholdParameters"


class InvalidShareSet(ReconstructionError):
    """The share-set document is not a JSON object of the expected shape."""

    kind = "InvalidShareSet"


class SecretOverflow(ReconstructionError):
    """The rounded secret does not fit the configured integer width."""

    kind = "SecretOverflow"

    def __init__(self, message: str, *, value: object, bits: int) -> None:
        super().__init__(message)
        self.value = value
        self.bits = bits


__all__ = [
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
