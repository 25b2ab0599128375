"""
Quantum gate definitions.

All gates are fixed 2x2 complex matrices (numpy arrays). Multi-qubit
gates are not stored as dense matrices; they are built per register by
``tiny_qed.operators`` from the single-qubit matrices and the
measurement projectors below.

Gate catalog:
    - Single-qubit: I, X, Y, Z, H
    - Two-qubit: CX (CNOT), expanded through the P0/P1 projectors
    - Measurement: identity on the state
"""

from __future__ import annotations

import numpy as np
from numpy import ndarray

# Type alias
Matrix = ndarray

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
_SQRT2_INV = 1.0 / np.sqrt(2.0)


def _frozen(m: Matrix) -> Matrix:
    m.flags.writeable = False
    return m


# ---------------------------------------------------------------------------
# Single-qubit fixed gates
# ---------------------------------------------------------------------------

I = _frozen(np.eye(2, dtype=np.complex128))
"""Identity gate."""

X = _frozen(np.array([[0, 1], [1, 0]], dtype=np.complex128))
"""Pauli-X (NOT) gate."""

Y = _frozen(np.array([[0, -1j], [1j, 0]], dtype=np.complex128))
"""Pauli-Y gate."""

Z = _frozen(np.array([[1, 0], [0, -1]], dtype=np.complex128))
"""Pauli-Z gate."""

H = _frozen(np.array([[1, 1], [1, -1]], dtype=np.complex128) * _SQRT2_INV)
"""Hadamard gate."""

# ---------------------------------------------------------------------------
# Measurement projectors
# ---------------------------------------------------------------------------

P0 = _frozen(np.diag([1, 0]).astype(np.complex128))
"""Projector onto |0⟩."""

P1 = _frozen(np.diag([0, 1]).astype(np.complex128))
"""Projector onto |1⟩."""

# ---------------------------------------------------------------------------
# Gate metadata registry
# ---------------------------------------------------------------------------

GATE_REGISTRY: dict[str, dict] = {
    "x": {"matrix": X, "n_qubits": 1, "label": "X"},
    "y": {"matrix": Y, "n_qubits": 1, "label": "Y"},
    "z": {"matrix": Z, "n_qubits": 1, "label": "Z"},
    "h": {"matrix": H, "n_qubits": 1, "label": "H"},
    # controlled gates carry the matrix applied to the target
    "cx": {"matrix": X, "n_qubits": 2, "label": "CX", "controlled": True},
    "measure": {"matrix": None, "n_qubits": 1, "label": "M"},
}


def get_matrix(name: str) -> Matrix:
    """
    Look up the base matrix of a gate by name.

    Parameters
    ----------
    name : str
        Gate name (case-insensitive).

    Returns
    -------
    numpy.ndarray
        2x2 matrix. For controlled gates this is the matrix applied to
        the target qubit.

    Raises
    ------
    KeyError
        If gate name is not found.
    ValueError
        If the gate has no matrix (measurement).
    """
    key = name.lower()
    if key not in GATE_REGISTRY:
        raise KeyError(f"Unknown gate: '{name}'. Available: {sorted(GATE_REGISTRY.keys())}")

    matrix = GATE_REGISTRY[key]["matrix"]
    if matrix is None:
        raise ValueError(f"Gate '{name}' has no matrix.")
    return matrix


def is_unitary(m: Matrix, tol: float = 1e-9) -> bool:
    """Check if a matrix is unitary: U†U = I."""
    product = m.conj().T @ m
    return np.allclose(product, np.eye(len(m)), atol=tol)
