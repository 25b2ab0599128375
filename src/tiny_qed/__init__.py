"""
tiny-qed: exact statevector simulation of small quantum circuits.

Circuits are immutable values. Gates are composed into one dense circuit
operator through Kronecker products, applied to the initial state, and
measurement outcomes are sampled from the final probabilities.

Quick Start:
    >>> import tiny_qed as qed
    >>> qc = qed.new_register(2, 2)
    >>> qc = qed.cx(qed.h(qc, 0), 0, 1)
    >>> counts = qed.run(qc, 1000)
    >>> sorted(counts)  # {'00': ~500, '11': ~500}
    ['00', '11']

Method style works too:
    >>> qc = Circuit(2, 2).h(0).cx(0, 1)
    >>> print(qc.draw())
"""
from __future__ import annotations

__version__ = "0.1.0"

from typing import Dict, Optional

from tiny_qed import gates
from tiny_qed.backends.statevector import SimulationResult, StatevectorBackend
from tiny_qed.backends.statevector import run as _run
from tiny_qed.circuit import Circuit, Instruction
from tiny_qed.qubit import Qubit, normalized
from tiny_qed.visualization import draw_circuit, plot_counts, show_counts


def new_register(n_qubits: int = 1, n_clbits: int = 1) -> Circuit:
    """New register of |0⟩ qubits and zeroed classical bits."""
    return Circuit(n_qubits, n_clbits)


def x(circuit: Circuit, qubit: int) -> Circuit:
    return circuit.x(qubit)


def y(circuit: Circuit, qubit: int) -> Circuit:
    return circuit.y(qubit)


def z(circuit: Circuit, qubit: int) -> Circuit:
    return circuit.z(qubit)


def h(circuit: Circuit, qubit: int) -> Circuit:
    return circuit.h(qubit)


def cx(circuit: Circuit, control: int, target: int) -> Circuit:
    return circuit.cx(control, target)


def measure(circuit: Circuit, qubit: int, clbit: int) -> Circuit:
    return circuit.measure(qubit, clbit)


def run(circuit: Circuit, shots: int, seed: Optional[int] = None) -> Dict[str, int]:
    """Outcome counts for ``shots`` samples of the circuit's final state."""
    return _run(circuit, shots, seed=seed)


def draw(circuit: Circuit) -> str:
    """Text diagram of the circuit."""
    return draw_circuit(circuit)


def plot(counts: Dict[str, int], filename: Optional[str] = None):
    """Bar chart of the counts returned by ``run``."""
    return plot_counts(counts, filename=filename)


__all__ = [
    # Core
    'Circuit',
    'Instruction',
    'Qubit',
    'normalized',
    'StatevectorBackend',
    'SimulationResult',
    'gates',
    # Functional API
    'new_register',
    'x',
    'y',
    'z',
    'h',
    'cx',
    'measure',
    'run',
    'draw',
    'plot',
    # Visualization
    'draw_circuit',
    'show_counts',
    'plot_counts',
]
