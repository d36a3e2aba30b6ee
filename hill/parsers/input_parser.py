"""
Input Parser
=============

Cleans raw user input before it reaches the cipher: messages are reduced
to uppercase A-Z, dimensions are parsed and range-checked, and keys are
trimmed and validated against the dimension.
"""

from __future__ import annotations

import string
from typing import Optional

from hill.core.keys import normalize_key
from hill.errors import EmptyMessage, InvalidDimension

_LETTERS = frozenset(string.ascii_letters)


def sanitize_message(raw: str) -> str:
    """Keep only ASCII letters from *raw* and uppercase them.

    An empty (or whitespace-only) message yields ``""``.

    Raises:
        EmptyMessage: If *raw* had content but no letters survived.
    """
    stripped = raw.strip()
    sanitized = "".join(ch for ch in stripped if ch in _LETTERS).upper()
    if stripped and not sanitized:
        raise EmptyMessage(raw)
    return sanitized


def parse_dimension(raw: str | int, max_dimension: Optional[int] = None) -> int:
    """Parse a block dimension from user input.

    Raises:
        InvalidDimension: For non-integers, values <= 0, or values above
            *max_dimension* when one is given.
    """
    if isinstance(raw, bool):
        raise InvalidDimension(raw)
    if isinstance(raw, int):
        dimension = raw
    else:
        try:
            dimension = int(str(raw).strip())
        except ValueError:
            raise InvalidDimension(raw) from None
    if dimension <= 0:
        raise InvalidDimension(dimension)
    if max_dimension is not None and dimension > max_dimension:
        raise InvalidDimension(dimension, max_dimension)
    return dimension


def validate_key(raw: str, dimension: int) -> str:
    """Trim *raw*, check it against *dimension* and return it uppercased.

    Raises:
        InvalidCharacter: For the first non-letter.
        KeyLengthMismatch: If the length is not ``dimension ** 2``.
    """
    return normalize_key(raw.strip(), dimension)
