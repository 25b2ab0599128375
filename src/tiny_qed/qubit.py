"""
Single-qubit states.

A qubit is the pair of complex amplitudes (alpha, beta) of
alpha|0⟩ + beta|1⟩. Normalization is a query, not a constructor check,
so callers may build a qubit first and validate it afterwards.

Example
-------
>>> from tiny_qed.qubit import Qubit, normalized
>>> normalized(Qubit(0.6, 0.8))
True
>>> Qubit(0.6, 0.8).ket1()
Qubit(alpha=0j, beta=(1+0j))
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy import ndarray

NORMALIZATION_TOL = 1e-7


@dataclass(frozen=True)
class Qubit:
    """Immutable amplitude pair. Defaults to |0⟩."""

    alpha: complex = 1 + 0j
    beta: complex = 0j

    def __post_init__(self) -> None:
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "alpha", complex(self.alpha))
        object.__setattr__(self, "beta", complex(self.beta))

    @property
    def state(self) -> ndarray:
        """Amplitudes as a length-2 complex128 vector."""
        return np.array([self.alpha, self.beta], dtype=np.complex128)

    @property
    def is_normalized(self) -> bool:
        return normalized(self)

    def ket0(self) -> Qubit:
        """Return a new qubit in |0⟩."""
        return ket0()

    def ket1(self) -> Qubit:
        """
        Return a new qubit in |1⟩.

        This is a reset: the receiver's amplitudes are discarded, it is not
        a bit flip of the current state.
        """
        return ket1()


def ket0() -> Qubit:
    return Qubit(1, 0)


def ket1() -> Qubit:
    return Qubit(0, 1)


def normalized(qubit: Qubit, tol: float = NORMALIZATION_TOL) -> bool:
    """True iff |alpha|² + |beta|² is within ``tol`` of 1."""
    norm2 = abs(qubit.alpha) ** 2 + abs(qubit.beta) ** 2
    return abs(norm2 - 1.0) <= tol
