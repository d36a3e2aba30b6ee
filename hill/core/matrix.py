"""
Matrix Operations
==================

Square-matrix primitives needed to invert a key matrix over Z/26Z:
determinant, minors, adjugate, scalar multiplication and the
matrix-vector product.

Determinants are computed by Laplace cofactor expansion along the first
remaining row. All arithmetic is exact integer arithmetic: entries are
snapped to the nearest integer on the way in, and sub-determinants that
share the same remaining columns are computed once. With that cache an
n x n expansion costs O(n * 2^n) instead of O(n!), which keeps the
adjugate of a 10 x 10 key well under a second.

References:
    - Laplace, P.-S. (1772). Recherches sur le calcul integral et sur le
      systeme du monde. (Cofactor expansion.)
    - Strang, G. (2016). Introduction to Linear Algebra, 5th ed.
      Wellesley-Cambridge Press. Section 5.3 (Cramer's rule, inverses).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from hill.core.modular import round_to_int
from hill.errors import NonSquareMatrix

MatrixLike = Union[Sequence[Sequence[float]], NDArray]
IntRows = tuple[tuple[int, ...], ...]


def _square_rows(matrix: MatrixLike) -> IntRows:
    """Validate *matrix* as square and return it as exact integer rows."""
    arr = np.atleast_2d(np.asarray(matrix))
    if arr.ndim != 2:
        raise NonSquareMatrix(arr.shape[0], int(np.prod(arr.shape[1:])))
    rows, cols = arr.shape
    if rows != cols or rows == 0:
        raise NonSquareMatrix(rows, cols)
    return tuple(tuple(round_to_int(v) for v in row) for row in arr.tolist())


def _laplace(rows: IntRows) -> int:
    n = len(rows)

    @lru_cache(maxsize=None)
    def expand(cols: tuple[int, ...]) -> int:
        # The submatrix uses the last len(cols) rows and the given columns.
        row = rows[n - len(cols)]
        if len(cols) == 1:
            return row[cols[0]]
        total = 0
        for k, col in enumerate(cols):
            entry = row[col]
            if entry == 0:
                continue
            sub = expand(cols[:k] + cols[k + 1:])
            total += -entry * sub if k % 2 else entry * sub
        return total

    return expand(tuple(range(n)))


def determinant(matrix: MatrixLike) -> int:
    """Determinant of a square matrix by cofactor expansion.

    For a 1 x 1 matrix the determinant is its single element.

    Raises:
        NonSquareMatrix: If *matrix* is not square.
    """
    return _laplace(_square_rows(matrix))


def _minor_rows(rows: IntRows, i: int, j: int) -> IntRows:
    return tuple(
        row[:j] + row[j + 1:]
        for r, row in enumerate(rows)
        if r != i
    )


def minor(matrix: MatrixLike, i: int, j: int) -> int:
    """Determinant of *matrix* with row *i* and column *j* removed."""
    rows = _square_rows(matrix)
    if len(rows) == 1:
        raise ValueError("a 1x1 matrix has no minors")
    return _laplace(_minor_rows(rows, i, j))


def adjugate(matrix: MatrixLike) -> NDArray:
    """Classical adjugate: ``adj[j][i] = (-1)**(i+j) * minor(i, j)``.

    Returns an ``object`` array of Python ints so that large cofactors of
    big keys never overflow. The adjugate of a 1 x 1 matrix is ``[[1]]``.

    Raises:
        NonSquareMatrix: If *matrix* is not square.
    """
    rows = _square_rows(matrix)
    n = len(rows)
    adj = np.empty((n, n), dtype=object)
    if n == 1:
        adj[0, 0] = 1
        return adj

    for i in range(n):
        for j in range(n):
            cofactor = _laplace(_minor_rows(rows, i, j))
            adj[j, i] = -cofactor if (i + j) % 2 else cofactor
    return adj


def scale(matrix: MatrixLike, factor: int) -> NDArray:
    """Multiply every entry of *matrix* by the integer *factor*."""
    arr = np.asarray(matrix, dtype=object)
    return arr * factor


def multiply(matrix: MatrixLike, vector: Sequence[int] | NDArray) -> NDArray:
    """Matrix-vector product ``matrix @ vector`` as an int64 vector."""
    mat = np.asarray(matrix, dtype=np.int64)
    vec = np.asarray(vector, dtype=np.int64).reshape(-1)
    if mat.ndim != 2 or mat.shape[1] != vec.shape[0]:
        raise ValueError(
            f"cannot multiply {mat.shape} matrix by vector of length {vec.shape[0]}"
        )
    return mat @ vec
