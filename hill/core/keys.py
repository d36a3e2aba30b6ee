"""
Key Matrix Builder
===================

Turns a key string into the n x n key matrix K and derives K^-1 modulo 26
with the adjugate-and-determinant method:

    K^-1 = (det K)^-1 * adj(K)   (mod 26)

which exists exactly when ``gcd(det K mod 26, 26) == 1``.

Reference:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
"""

from __future__ import annotations

import string
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from hill.core.alphabet import encode
from hill.core.matrix import adjugate, determinant, scale
from hill.core.models import KeyDerivation
from hill.core.modular import (
    modular_inverse,
    reduce_array_mod26,
    reduce_mod26,
    round_to_int,
)
from hill.errors import (
    InvalidCharacter,
    InvalidDimension,
    KeyLengthMismatch,
    MatrixNotInvertible,
    NoModularInverse,
)

KeyMatrix = NDArray[np.int64]


def normalize_key(key: str, dimension: int) -> str:
    """Check a key against *dimension* and return it uppercased.

    Lowercase letters are accepted. Checks run in order: dimension,
    characters, length.

    Raises:
        InvalidDimension: If *dimension* is not a positive integer.
        InvalidCharacter: For the first non-letter in *key*.
        KeyLengthMismatch: If ``len(key) != dimension ** 2``.
    """
    if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension <= 0:
        raise InvalidDimension(dimension)
    for position, char in enumerate(key):
        if char not in string.ascii_letters:
            raise InvalidCharacter(char, position)
    if len(key) != dimension * dimension:
        raise KeyLengthMismatch(len(key), dimension)
    return key.upper()


def _frozen(arr: NDArray) -> NDArray:
    arr.setflags(write=False)
    return arr


def build_key_matrix(key: str, dimension: int) -> KeyMatrix:
    """Lay out the letter codes of *key* row-major in an n x n matrix.

    *key* must already be validated (see :func:`normalize_key`). The
    returned array is read-only.
    """
    codes = [encode(letter) for letter in key]
    return _frozen(np.array(codes, dtype=np.int64).reshape(dimension, dimension))


def _invert_determinant(det: int) -> tuple[int, int]:
    """Return ``(det mod 26, its inverse)`` or raise :class:`MatrixNotInvertible`."""
    mod_det = reduce_mod26(det)
    if mod_det == 0:
        raise MatrixNotInvertible(det, mod_det, MatrixNotInvertible.ZERO)
    try:
        det_inverse = modular_inverse(mod_det)
    except NoModularInverse as exc:
        raise MatrixNotInvertible(det, mod_det, MatrixNotInvertible.NO_INVERSE) from exc
    return mod_det, det_inverse


class _Inversion(NamedTuple):
    determinant: int
    mod_determinant: int
    determinant_inverse: int
    adjugate: NDArray
    inverse: KeyMatrix


def _invert(key_matrix: KeyMatrix) -> _Inversion:
    det = round_to_int(determinant(key_matrix))
    mod_det, det_inverse = _invert_determinant(det)
    adj = adjugate(key_matrix)
    inverse = _frozen(reduce_array_mod26(scale(adj, det_inverse)))
    return _Inversion(det, mod_det, det_inverse, adj, inverse)


def build_inverse_key_matrix(key_matrix: KeyMatrix) -> KeyMatrix:
    """Derive K^-1 mod 26 such that ``K @ K^-1 == I (mod 26)``.

    Raises:
        MatrixNotInvertible: When det(K) is 0 mod 26, or shares a factor
            with 26 so that no modular inverse exists.
        NonSquareMatrix: If *key_matrix* is not square.
    """
    return _invert(key_matrix).inverse


def derive_key_schedule(key: str, dimension: int) -> KeyDerivation:
    """Run the whole derivation and keep every intermediate value.

    Same result as :func:`build_key_matrix` followed by
    :func:`build_inverse_key_matrix`, with the determinant, its residue
    and inverse, and the adjugate kept for display.
    """
    normalized = normalize_key(key, dimension)
    key_matrix = build_key_matrix(normalized, dimension)
    inversion = _invert(key_matrix)

    return KeyDerivation(
        key=normalized,
        dimension=dimension,
        key_matrix=key_matrix.tolist(),
        determinant=inversion.determinant,
        mod_determinant=inversion.mod_determinant,
        determinant_inverse=inversion.determinant_inverse,
        adjugate=[[int(v) for v in row] for row in inversion.adjugate.tolist()],
        inverse_matrix=inversion.inverse.tolist(),
    )
