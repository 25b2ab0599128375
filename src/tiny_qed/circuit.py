"""
Quantum circuit representation.

A circuit (register) holds its qubits, classical bits, initial joint state
vector and an ordered list of instructions. Circuits are values: every gate
method returns a new circuit with one more instruction and leaves the
receiver untouched.

Example
-------
>>> from tiny_qed import Circuit
>>> qc = Circuit(2, 2)
>>> bell = qc.h(0).cx(0, 1).measure(0, 0).measure(1, 1)
>>> len(qc), len(bell)
(0, 4)
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from numbers import Integral
from typing import Sequence

import numpy as np
from numpy import ndarray

from tiny_qed.qubit import Qubit
from tiny_qed.tensor import kron


# ---------------------------------------------------------------------------
# Instruction — a single operation in the circuit
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Instruction:
    """A single gate or measurement applied to specific qubits."""
    name: str
    qubits: tuple[int, ...]
    classical_bits: tuple[int, ...] = ()  # for measurements

    def __post_init__(self):
        # gate names are case-insensitive; store the registry key
        object.__setattr__(self, "name", self.name.lower())

    @property
    def n_qubits(self) -> int:
        return len(self.qubits)

    @property
    def is_measurement(self) -> bool:
        return self.name == "measure"


def _check_count(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise ValueError(f"Number of {what} must be a positive integer, got {value!r}")
    return int(value)


def initial_state(qubits: Sequence[Qubit]) -> ndarray:
    """
    Joint state vector of ``qubits``.

    Folds ``kron`` over the qubits in index order with each new qubit on
    the left, so qubit 0 ends up as the least-significant tensor factor.
    """
    state = reduce(
        lambda acc, q: kron(q.state, acc),
        qubits,
        np.ones(1, dtype=np.complex128),
    )
    state.flags.writeable = False
    return state


# ---------------------------------------------------------------------------
# Circuit
# ---------------------------------------------------------------------------

class Circuit:
    """
    Quantum register with n_qubits quantum bits and n_clbits classical bits.

    Gate methods never validate qubit or classical bit indices; an
    out-of-range index is reported when the circuit is simulated.

    Parameters
    ----------
    n_qubits : int
        Number of quantum bits (>= 1).
    n_clbits : int
        Number of classical bits (>= 1). They are bookkeeping only and are
        never written by the simulator.
    qubits : sequence of Qubit, optional
        Initial qubit states. Defaults to |0⟩ for every qubit.

    Raises
    ------
    ValueError
        If a count is not a positive integer or ``qubits`` has the wrong
        length.
    """

    def __init__(
        self,
        n_qubits: int = 1,
        n_clbits: int = 1,
        qubits: Sequence[Qubit] | None = None,
    ) -> None:
        n_qubits = _check_count(n_qubits, "qubits")
        n_clbits = _check_count(n_clbits, "classical bits")
        if qubits is None:
            qubits = [Qubit() for _ in range(n_qubits)]
        elif len(qubits) != n_qubits:
            raise ValueError(
                f"Expected {n_qubits} initial qubits, got {len(qubits)}"
            )
        self._qubits: tuple[Qubit, ...] = tuple(qubits)
        self._classical_bits: tuple[int, ...] = (0,) * n_clbits
        self._state_vector = initial_state(self._qubits)
        self._instructions: tuple[Instruction, ...] = ()

    # -- Properties ---------------------------------------------------------

    @property
    def n_qubits(self) -> int:
        return len(self._qubits)

    @property
    def n_clbits(self) -> int:
        return len(self._classical_bits)

    @property
    def qubits(self) -> tuple[Qubit, ...]:
        return self._qubits

    @property
    def classical_bits(self) -> tuple[int, ...]:
        return self._classical_bits

    @property
    def state_vector(self) -> ndarray:
        """Initial joint state (read-only). Not updated by instructions."""
        return self._state_vector

    @property
    def instructions(self) -> tuple[Instruction, ...]:
        """Instructions in execution order."""
        return self._instructions

    @property
    def depth(self) -> int:
        """Circuit depth (longest path through any qubit), ignoring measurements."""
        qubit_depth: dict[int, int] = {}
        for inst in self._instructions:
            if inst.is_measurement:
                continue
            max_d = max(qubit_depth.get(q, 0) for q in inst.qubits)
            for q in inst.qubits:
                qubit_depth[q] = max_d + 1
        return max(qubit_depth.values(), default=0)

    @property
    def num_gates(self) -> int:
        """Total number of gates (excluding measurements)."""
        return sum(1 for inst in self._instructions if not inst.is_measurement)

    # -- Internal helpers ---------------------------------------------------

    def _append(self, inst: Instruction) -> Circuit:
        new = object.__new__(type(self))
        new._qubits = self._qubits
        new._classical_bits = self._classical_bits
        new._state_vector = self._state_vector
        new._instructions = self._instructions + (inst,)
        return new

    def _add(self, name: str, qubits: tuple[int, ...]) -> Circuit:
        return self._append(Instruction(name=name, qubits=qubits))

    # -- Single-qubit gates -------------------------------------------------

    def x(self, qubit: int) -> Circuit:
        """Pauli-X gate."""
        return self._add("x", (qubit,))

    def y(self, qubit: int) -> Circuit:
        """Pauli-Y gate."""
        return self._add("y", (qubit,))

    def z(self, qubit: int) -> Circuit:
        """Pauli-Z gate."""
        return self._add("z", (qubit,))

    def h(self, qubit: int) -> Circuit:
        """Hadamard gate."""
        return self._add("h", (qubit,))

    # -- Two-qubit gates ----------------------------------------------------

    def cx(self, control: int, target: int) -> Circuit:
        """Controlled-NOT (CNOT) gate."""
        return self._add("cx", (control, target))

    # -- Measurement --------------------------------------------------------

    def measure(self, qubit: int, clbit: int) -> Circuit:
        """
        Add a measurement of ``qubit`` into classical bit ``clbit``.

        Measurement does not collapse the simulated state: outcomes come
        from the final state only, so a measurement placed mid-circuit has
        the same effect on the counts as no measurement at all.
        """
        return self._append(
            Instruction(name="measure", qubits=(qubit,), classical_bits=(clbit,))
        )

    # -- Display ------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._instructions)

    def __repr__(self) -> str:
        return (
            f"Circuit(n_qubits={self.n_qubits}, n_clbits={self.n_clbits}, "
            f"depth={self.depth}, gates={self.num_gates})"
        )

    def draw(self) -> str:
        """Draw the circuit as a text diagram."""
        from tiny_qed.visualization import draw_circuit
        return draw_circuit(self)
