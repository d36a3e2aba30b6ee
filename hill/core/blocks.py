"""
Block Codec
============

Conversion between letter strings and fixed-length integer vectors
(blocks), plus padding of plaintext to a whole number of blocks.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from hill.core.alphabet import decode, encode
from hill.core.modular import round_to_int
from hill.errors import InvalidCharacter, InvalidDimension

PADDING_CHAR: str = "X"

Block = NDArray[np.int64]


def _check_dimension(dimension: int) -> None:
    if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension <= 0:
        raise InvalidDimension(dimension)


def pad_to_block_size(text: str, dimension: int) -> str:
    """Append ``'X'`` until ``len(text)`` is a multiple of *dimension*.

    Only plaintext is padded. Ciphertext produced by the cipher is
    always block aligned already.
    """
    _check_dimension(dimension)
    remainder = len(text) % dimension
    if remainder == 0:
        return text
    return text + PADDING_CHAR * (dimension - remainder)


def text_to_blocks(text: str, dimension: int) -> list[Block]:
    """Split *text* into consecutive blocks of *dimension* letter codes.

    The number of blocks is ``len(text) // dimension``: a trailing partial
    chunk is dropped without error. Encryption always pads first, so this
    only affects ciphertext typed in by hand.

    Raises:
        InvalidCharacter: If a character in a complete block is not A-Z.
    """
    _check_dimension(dimension)
    blocks: list[Block] = []
    for start in range(0, (len(text) // dimension) * dimension, dimension):
        codes = []
        for offset, letter in enumerate(text[start:start + dimension]):
            try:
                codes.append(encode(letter))
            except InvalidCharacter:
                raise InvalidCharacter(letter, start + offset) from None
        blocks.append(np.array(codes, dtype=np.int64))
    return blocks


def blocks_to_text(blocks: Iterable[Iterable[float]]) -> str:
    """Decode every component of every block, in order, into one string.

    Raises:
        InvalidCode: If a component (after rounding) is outside [0, 25].
    """
    return "".join(
        decode(round_to_int(value))
        for block in blocks
        for value in np.asarray(block).reshape(-1).tolist()
    )
