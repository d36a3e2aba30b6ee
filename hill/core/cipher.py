"""
Hill Cipher
============

The cipher itself: a key matrix K and its inverse modulo 26, applied to
consecutive blocks of n letters.

    encrypt:  C = K   . P   (mod 26)
    decrypt:  P = K^-1 . C  (mod 26)

A :class:`HillCipher` is immutable once constructed; both matrices are
read-only numpy arrays, so one instance can be shared freely. The class
does no I/O and no logging.

Reference:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from hill.core.blocks import Block, blocks_to_text, pad_to_block_size, text_to_blocks
from hill.core.keys import (
    KeyMatrix,
    build_inverse_key_matrix,
    build_key_matrix,
    normalize_key,
)
from hill.core.matrix import multiply
from hill.core.models import KeyDerivation
from hill.core.modular import reduce_array_mod26


def _read_only(rows: list[list[int]]) -> KeyMatrix:
    arr = np.array(rows, dtype=np.int64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class BlockTransform:
    """Intermediate values for one block: input, raw product, reduced output."""

    source: Block
    product: NDArray[np.int64]
    result: Block


class HillCipher:
    """Hill cipher bound to one key and block dimension.

    Usage::

        cipher = HillCipher("HILL", 2)
        ciphertext = cipher.encrypt("HELP")
        assert cipher.decrypt(ciphertext) == "HELP"

    Args:
        key: ``dimension ** 2`` letters; lowercase is accepted.
        dimension: Block size n (> 0).

    Raises:
        InvalidDimension: ``dimension <= 0``.
        InvalidCharacter: Non-letter in *key*.
        KeyLengthMismatch: ``len(key) != dimension ** 2``.
        MatrixNotInvertible: The key matrix has no inverse mod 26.
    """

    def __init__(self, key: str, dimension: int) -> None:
        normalized = normalize_key(key, dimension)
        self._key = normalized
        self._dimension = dimension
        self._key_matrix = build_key_matrix(normalized, dimension)
        self._inverse_key_matrix = build_inverse_key_matrix(self._key_matrix)

    @classmethod
    def from_schedule(cls, schedule: KeyDerivation) -> HillCipher:
        """Build a cipher from an already derived key schedule.

        Both matrices are taken from *schedule* as they are, so nothing is
        inverted a second time.
        """
        cipher = cls.__new__(cls)
        cipher._key = schedule.key
        cipher._dimension = schedule.dimension
        cipher._key_matrix = _read_only(schedule.key_matrix)
        cipher._inverse_key_matrix = _read_only(schedule.inverse_matrix)
        return cipher

    def __repr__(self) -> str:
        return f"HillCipher(key={self._key!r}, dimension={self._dimension})"

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def key(self) -> str:
        return self._key

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def key_matrix(self) -> KeyMatrix:
        """K (read-only)."""
        return self._key_matrix

    @property
    def inverse_key_matrix(self) -> KeyMatrix:
        """K^-1 mod 26 (read-only)."""
        return self._inverse_key_matrix

    # ------------------------------------------------------------------ #
    #  Block-level API
    # ------------------------------------------------------------------ #

    def _transform(self, text: str, matrix: KeyMatrix) -> list[BlockTransform]:
        steps: list[BlockTransform] = []
        for block in text_to_blocks(text, self._dimension):
            product = multiply(matrix, block)
            steps.append(BlockTransform(block, product, reduce_array_mod26(product)))
        return steps

    def encrypt_blocks(self, plaintext: str) -> list[BlockTransform]:
        """Pad *plaintext* and push every block through K."""
        if not plaintext:
            return []
        padded = pad_to_block_size(plaintext, self._dimension)
        return self._transform(padded, self._key_matrix)

    def decrypt_blocks(self, ciphertext: str) -> list[BlockTransform]:
        """Push every complete block of *ciphertext* through K^-1.

        No padding is added; a trailing partial block is ignored.
        """
        if not ciphertext:
            return []
        return self._transform(ciphertext, self._inverse_key_matrix)

    # ------------------------------------------------------------------ #
    #  Text API
    # ------------------------------------------------------------------ #

    def encrypt(self, plaintext: str) -> str:
        """Encrypt uppercase letters; the output length is a multiple of n.

        Raises:
            InvalidCharacter: If *plaintext* holds anything but A-Z.
        """
        return blocks_to_text(step.result for step in self.encrypt_blocks(plaintext))

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt uppercase letters.

        Padding added during encryption is kept in the output.

        Raises:
            InvalidCharacter: If *ciphertext* holds anything but A-Z.
        """
        return blocks_to_text(step.result for step in self.decrypt_blocks(ciphertext))
