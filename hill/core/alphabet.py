"""
Alphabet Codec
===============

Fixed bijection between the 26 uppercase Latin letters and the residues
0..25 used as matrix entries.
"""

from __future__ import annotations

import numbers
import string
from types import MappingProxyType
from typing import Mapping

from hill.errors import InvalidCharacter, InvalidCode

ALPHABET: str = string.ascii_uppercase
MODULUS: int = len(ALPHABET)

LETTER_TO_CODE: Mapping[str, int] = MappingProxyType(
    {letter: code for code, letter in enumerate(ALPHABET)}
)


def encode(letter: str) -> int:
    """Map ``'A'..'Z'`` to ``0..25``.

    Raises:
        InvalidCharacter: If *letter* is not a single uppercase Latin letter.
    """
    try:
        return LETTER_TO_CODE[letter]
    except (KeyError, TypeError):
        raise InvalidCharacter(letter) from None


def decode(code: int) -> str:
    """Map ``0..25`` back to ``'A'..'Z'``.

    Any integral type is accepted, numpy scalars included.

    Raises:
        InvalidCode: If *code* is not an integer or lies outside ``[0, 25]``.
    """
    if not isinstance(code, numbers.Integral) or isinstance(code, bool):
        raise InvalidCode(code)
    value = int(code)
    if not 0 <= value < MODULUS:
        raise InvalidCode(code)
    return ALPHABET[value]
