"""
Modular Arithmetic
===================

Residue reduction and multiplicative inverses modulo 26.

Reference:
    - Hardy, G. H. & Wright, E. M. (1979). An Introduction to the Theory
      of Numbers, 5th ed. Oxford University Press. Chapter V.
"""

from __future__ import annotations

import numbers
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hill.core.alphabet import MODULUS
from hill.errors import NoModularInverse

Number = Union[int, float]


def round_to_int(value: Number) -> int:
    """Round a real value to the nearest integer (half away from zero).

    Matrix entries are integers; values arriving as floats (numpy
    scalars included) are snapped back before any residue is taken.
    """
    if isinstance(value, numbers.Integral):
        return int(value)
    value = float(value)
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def reduce_mod26(value: Number) -> int:
    """Return the non-negative residue of *value* modulo 26."""
    return round_to_int(value) % MODULUS


def reduce_array_mod26(values: ArrayLike) -> NDArray[np.int64]:
    """Elementwise :func:`reduce_mod26`, preserving the input shape."""
    arr = np.asarray(values, dtype=object)
    reduced = [reduce_mod26(v) for v in arr.flat]
    return np.array(reduced, dtype=np.int64).reshape(arr.shape)


def modular_inverse(value: int, modulus: int = MODULUS) -> int:
    """Smallest positive ``i`` with ``(value * i) % modulus == 1``.

    Linear search over ``1..modulus-1``; the modulus is tiny.

    Raises:
        NoModularInverse: When ``gcd(value, modulus) != 1``.
    """
    for candidate in range(1, modulus):
        if (value * candidate) % modulus == 1:
            return candidate
    raise NoModularInverse(value, modulus)
