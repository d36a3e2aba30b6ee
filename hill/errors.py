"""
Hill Cipher Exceptions
=======================

Exception hierarchy for the Hill cipher tool. Every failure raised by the
core derives from :class:`HillError` and carries the offending value as
attributes so the caller can render its own message.
"""

from __future__ import annotations

from typing import Optional


class HillError(Exception):
    """Base class for all Hill cipher errors."""

    pass


class InvalidDimension(HillError, ValueError):
    """Block dimension is not a positive integer, or exceeds the allowed maximum."""

    def __init__(self, dimension: object, maximum: Optional[int] = None) -> None:
        self.dimension = dimension
        self.maximum = maximum
        if maximum is None:
            message = f"matrix dimension must be a positive integer, got {dimension!r}"
        else:
            message = f"matrix dimension {dimension} exceeds the maximum of {maximum}"
        super().__init__(message)


class KeyLengthMismatch(HillError, ValueError):
    """Key length differs from ``dimension * dimension``."""

    def __init__(self, length: int, dimension: int) -> None:
        self.length = length
        self.dimension = dimension
        expected = dimension * dimension
        super().__init__(
            f"key value length ({length}) does not match matrix dimensions "
            f"({dimension}*{dimension}={expected})"
        )


class InvalidCharacter(HillError, ValueError):
    """A character outside A-Z was found where a letter was expected."""

    def __init__(self, character: str, position: Optional[int] = None) -> None:
        self.character = character
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"invalid character {character!r}{where}: expected A-Z")


class InvalidCode(HillError, ValueError):
    """An integer outside [0, 25] cannot be mapped back to a letter."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__(f"invalid numerical value in vector: {code}")


class NonSquareMatrix(HillError):
    """Determinant or adjugate requested for a non-square matrix."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(f"matrix must be square, got {rows}x{cols}")


class NoModularInverse(HillError):
    """``value`` has no multiplicative inverse modulo ``modulus``."""

    def __init__(self, value: int, modulus: int) -> None:
        self.value = value
        self.modulus = modulus
        super().__init__(f"no modular inverse for {value} mod {modulus}")


class MatrixNotInvertible(HillError):
    """Key matrix has no inverse modulo 26.

    ``reason`` is ``"zero"`` when the determinant reduces to 0 and
    ``"no-inverse"`` when the residue shares a factor with 26.
    """

    ZERO = "zero"
    NO_INVERSE = "no-inverse"

    def __init__(self, determinant: int, mod_determinant: int, reason: str) -> None:
        self.determinant = determinant
        self.mod_determinant = mod_determinant
        self.reason = reason
        if reason == self.ZERO:
            detail = "determinant is 0 mod 26"
        else:
            detail = f"determinant {mod_determinant} (mod 26) has no modular inverse"
        super().__init__(
            f"matrix is not invertible: {detail} (determinant = {determinant})"
        )


class EmptyMessage(HillError, ValueError):
    """A non-empty message contained no letters to process."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("message contains no valid alphabetic characters to encrypt")
