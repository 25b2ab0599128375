"""
Dense statevector simulation backend.

Every instruction is expanded to a full 2^n × 2^n operator and the
operators are multiplied into a single circuit operator, which is then
applied once to the initial state. This is O(4^n) memory and meant for
small registers only.

Pipeline:
    circuit → circuit operator → final state → probabilities → sampled counts
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral

import numpy as np
from numpy import ndarray

from tiny_qed.circuit import Circuit
from tiny_qed.operators import instruction_operator

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """
    Result of a quantum circuit simulation.

    Attributes
    ----------
    counts : dict[str, int]
        Outcome label (most significant bit = highest qubit index) to number
        of shots that produced it. Values sum to ``shots``.
    statevector : ndarray
        Final state vector (complex128, length 2^n).
    n_qubits : int
        Number of qubits.
    shots : int
        Number of measurement shots.
    """

    counts: dict[str, int]
    statevector: ndarray
    n_qubits: int
    shots: int

    def probabilities(self) -> dict[str, float]:
        """Exact outcome probabilities from the statevector, zeros omitted."""
        probs = np.abs(self.statevector) ** 2
        return {
            label: float(p)
            for label, p in zip(basis_labels(self.n_qubits), probs)
            if p > 0
        }

    def most_frequent(self) -> str:
        """Return the most frequently sampled label."""
        return max(self.counts, key=self.counts.get)

    def probability(self, label: str) -> float:
        """Sampled frequency of ``label``."""
        return self.counts.get(label, 0) / self.shots


def basis_labels(n_qubits: int) -> list[str]:
    """Zero-padded binary labels for basis indices 0 .. 2^n - 1."""
    return [format(i, f"0{n_qubits}b") for i in range(2**n_qubits)]


def _check_shots(shots) -> int:
    if isinstance(shots, bool) or not isinstance(shots, Integral) or shots < 1:
        raise ValueError(f"shots must be a positive integer, got {shots!r}")
    return int(shots)


class StatevectorBackend:
    """
    Exact statevector simulator built on full-register operators.

    Parameters
    ----------
    seed : int | None
        Random seed for shot sampling.

    Example
    -------
    >>> from tiny_qed import Circuit, StatevectorBackend
    >>> qc = Circuit(2, 2).h(0).cx(0, 1)
    >>> result = StatevectorBackend(seed=42).run(qc, shots=1000)
    >>> sorted(result.counts)
    ['00', '11']
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def run(self, circuit: Circuit, shots: int = 1024) -> SimulationResult:
        """
        Simulate a circuit and sample ``shots`` outcomes.

        Raises
        ------
        ValueError
            If ``shots`` is not a positive integer.
        IndexError
            If an instruction refers to a qubit or classical bit outside
            the circuit.
        """
        shots = _check_shots(shots)
        state = self.final_state(circuit)
        probs = np.abs(state) ** 2
        counts = self.sample(probs, circuit.n_qubits, shots)
        return SimulationResult(
            counts=counts,
            statevector=state,
            n_qubits=circuit.n_qubits,
            shots=shots,
        )

    # -- Pipeline stages ----------------------------------------------------

    def circuit_operator(self, circuit: Circuit) -> ndarray:
        """
        Product of all instruction operators, latest instruction leftmost.

        After instructions I1..Ik the result is Uk · ... · U2 · U1.
        """
        n = circuit.n_qubits
        accumulator = np.eye(2**n, dtype=np.complex128)
        for inst in circuit.instructions:
            if inst.is_measurement:
                clbit = inst.classical_bits[0]
                if not 0 <= clbit < circuit.n_clbits:
                    raise IndexError(
                        f"Classical bit {clbit} out of range for "
                        f"{circuit.n_clbits} classical bits"
                    )
            accumulator = instruction_operator(inst, n) @ accumulator
        logger.debug(
            "composed %d instruction(s) into a %dx%d operator",
            len(circuit.instructions), 2**n, 2**n,
        )
        return accumulator

    def final_state(self, circuit: Circuit) -> ndarray:
        """Circuit operator applied to the circuit's initial state."""
        return self.circuit_operator(circuit) @ circuit.state_vector

    def probabilities(self, circuit: Circuit) -> ndarray:
        """|amplitude|² for every basis index, without renormalization."""
        return np.abs(self.final_state(circuit)) ** 2

    def statevector(self, circuit: Circuit) -> ndarray:
        """Convenience: final state vector of the circuit."""
        return self.final_state(circuit)

    def sample(self, probs: ndarray, n_qubits: int, shots: int) -> dict[str, int]:
        """
        Draw ``shots`` outcomes from ``probs`` by cumulative-sum inversion.

        For each shot a uniform r in [0, 1) selects the first label whose
        cumulative probability reaches r. Labels with zero probability are
        never chosen. If rounding leaves the total mass below r, the shot
        falls back to the last label with non-zero probability.
        """
        probs = np.asarray(probs, dtype=np.float64)
        support = np.flatnonzero(probs > 0)
        if support.size == 0:
            raise ValueError("Cannot sample from an all-zero probability vector")

        cumulative = np.cumsum(probs[support])
        draws = self._rng.random(shots)
        positions = np.searchsorted(cumulative, draws, side="left")

        overflow = positions >= support.size
        if overflow.any():
            logger.debug(
                "%d shot(s) above total probability %.17g, using last label",
                int(overflow.sum()), cumulative[-1],
            )
            positions[overflow] = support.size - 1

        outcomes, tallies = np.unique(support[positions], return_counts=True)
        return {
            format(int(i), f"0{n_qubits}b"): int(c)
            for i, c in zip(outcomes, tallies)
        }


def run(circuit: Circuit, shots: int, seed: int | None = None) -> dict[str, int]:
    """Simulate ``circuit`` and return outcome counts summing to ``shots``."""
    return StatevectorBackend(seed=seed).run(circuit, shots).counts
