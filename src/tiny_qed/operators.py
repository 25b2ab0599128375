"""
Full-register gate operators.

Each instruction is expanded into a dense 2^n × 2^n matrix by tensoring
its base matrices with the identity on every untouched qubit. The fold
runs from the highest qubit index down to 0, which matches the state
vector convention in ``tiny_qed.circuit``: qubit 0 is the
least-significant tensor factor.
"""

from __future__ import annotations

from typing import Mapping

import numpy as np

from tiny_qed import gates as g
from tiny_qed.circuit import Instruction
from tiny_qed.gates import Matrix
from tiny_qed.tensor import kron_all


def expand(assignment: Mapping[int, Matrix], n_qubits: int) -> Matrix:
    """
    Expand per-qubit matrices into an operator on the whole register.

    Parameters
    ----------
    assignment : mapping of int to ndarray
        Qubit index to 2x2 matrix. Unassigned qubits get the identity.
    n_qubits : int
        Register width.

    Raises
    ------
    IndexError
        If an assigned qubit index is outside ``[0, n_qubits)``.
    """
    for q in assignment:
        if not 0 <= q < n_qubits:
            raise IndexError(
                f"Qubit {q} out of range for {n_qubits}-qubit register"
            )
    factors = (assignment.get(i, g.I) for i in range(n_qubits - 1, -1, -1))
    return kron_all(factors, np.ones((1, 1), dtype=np.complex128))


def controlled(control: int, target: int, matrix: Matrix, n_qubits: int) -> Matrix:
    """
    Controlled gate via projector decomposition:
    ``P0(control) + P1(control) ⊗ matrix(target)``.
    """
    if control == target:
        raise ValueError(f"Control and target must differ, both are {control}")
    return expand({control: g.P0}, n_qubits) + expand(
        {control: g.P1, target: matrix}, n_qubits
    )


def instruction_operator(inst: Instruction, n_qubits: int) -> Matrix:
    """
    Resolve an instruction to its full-register operator.

    Measurements resolve to the identity: they leave the state unchanged,
    but the measured qubit index is still range-checked.

    Raises
    ------
    KeyError
        If the instruction names an unknown gate.
    IndexError
        If a qubit index is out of range.
    ValueError
        If a controlled gate uses the same qubit as control and target.
    """
    if inst.is_measurement:
        return expand({inst.qubits[0]: g.I}, n_qubits)

    matrix = g.get_matrix(inst.name)
    if g.GATE_REGISTRY[inst.name].get("controlled"):
        control, target = inst.qubits
        return controlled(control, target, matrix, n_qubits)
    return expand({inst.qubits[0]: matrix}, n_qubits)
