"""
Tensor (Kronecker) products over vectors and matrices.

This is the only primitive used to build joint register states and to
expand per-qubit gate matrices into full-register operators.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable

import numpy as np
from numpy import ndarray


def kron(a: ndarray, b: ndarray) -> ndarray:
    """
    Generalized Kronecker product of two vectors or matrices.

    A rank-1 operand of length m is treated as an m×1 matrix. If both
    operands are vectors the result is a vector again, otherwise a matrix.

    Parameters
    ----------
    a, b : array_like
        Rank-1 or rank-2 operands. Complex entries are kept as is.

    Returns
    -------
    ndarray
        For vectors u (m), v (n): length m*n with ``out[i*n + j] = u[i]*v[j]``.
        For matrices A (p×q), B (r×s): shape (p*r, q*s) with
        ``out[i*r + k, j*s + l] = A[i, j] * B[k, l]``.

    Raises
    ------
    ValueError
        If an operand is neither rank 1 nor rank 2.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    for operand in (a, b):
        if operand.ndim not in (1, 2):
            raise ValueError(
                f"kron expects rank-1 or rank-2 operands, got shape {operand.shape}"
            )

    both_vectors = a.ndim == 1 and b.ndim == 1
    a2 = a.reshape(-1, 1) if a.ndim == 1 else a
    b2 = b.reshape(-1, 1) if b.ndim == 1 else b

    p, q = a2.shape
    r, s = b2.shape
    # out[i, k, j, l] = A[i, j] * B[k, l]
    out = np.einsum("ij,kl->ikjl", a2, b2).reshape(p * r, q * s)

    if both_vectors:
        return out.reshape(p * r)
    return out


def kron_all(factors: Iterable[ndarray], seed: ndarray) -> ndarray:
    """Fold ``kron`` left to right over ``factors``, starting from ``seed``."""
    return reduce(kron, factors, np.asarray(seed))
