"""
Circuit diagrams and result plots.

Features:
- Text circuit diagrams (no dependencies)
- Measurement histograms as text
- Measurement histograms as bar charts (requires matplotlib)

The drawer only looks at qubit/classical bit counts and the instruction
list; the plotters only look at an outcome-count mapping.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from tiny_qed.gates import GATE_REGISTRY


class CircuitDrawer:
    """
    Draw quantum circuits as text.

    Example output:
        q0: ──[H]──●───────
        q1: ───────⊕──[M]──
        c0: ═══════════╩═══
    """

    QUBIT_WIRE = '─'
    CLBIT_WIRE = '═'

    def __init__(self, num_qubits: int, num_clbits: int):
        self.num_qubits = num_qubits
        self.num_clbits = num_clbits
        self.columns: List[List[str]] = []

    def _check_qubit(self, qubit: int) -> None:
        if not 0 <= qubit < self.num_qubits:
            raise IndexError(f"Qubit {qubit} out of range for {self.num_qubits}-qubit circuit")

    def _empty_column(self) -> List[str]:
        return [self.QUBIT_WIRE] * self.num_qubits + [self.CLBIT_WIRE] * self.num_clbits

    def add_single_gate(self, gate: str, qubit: int) -> None:
        """Add a single-qubit gate."""
        self._check_qubit(qubit)
        col = self._empty_column()
        symbol = GATE_REGISTRY.get(gate.lower(), {}).get('label', gate.upper())
        col[qubit] = f'[{symbol}]'
        self.columns.append(col)

    def add_cx(self, control: int, target: int) -> None:
        """Add CNOT gate."""
        self._check_qubit(control)
        self._check_qubit(target)
        col = self._empty_column()
        for i in range(min(control, target) + 1, max(control, target)):
            col[i] = '┼'
        col[control] = '●'
        col[target] = '⊕'
        self.columns.append(col)

    def add_measure(self, qubit: int, clbit: int) -> None:
        """Add measurement, with a double line down to the classical bit."""
        self._check_qubit(qubit)
        if not 0 <= clbit < self.num_clbits:
            raise IndexError(f"Classical bit {clbit} out of range for {self.num_clbits} classical bits")
        col = self._empty_column()
        col[qubit] = '[M]'
        for i in range(qubit + 1, self.num_qubits):
            col[i] = '╫'
        for c in range(clbit):
            col[self.num_qubits + c] = '╬'
        col[self.num_qubits + clbit] = '╩'
        self.columns.append(col)

    def draw(self) -> str:
        """Generate the text diagram."""
        names = [f'q{q}: ' for q in range(self.num_qubits)]
        names += [f'c{c}: ' for c in range(self.num_clbits)]
        name_width = max(len(n) for n in names)
        widths = [max(3, max(len(cell) for cell in col)) for col in self.columns]

        lines = []
        for row, name in enumerate(names):
            fill = self.QUBIT_WIRE if row < self.num_qubits else self.CLBIT_WIRE
            cells = [col[row].center(w, fill) for col, w in zip(self.columns, widths)]
            lines.append(name.rjust(name_width) + fill * 2 + fill.join(cells) + fill * 2)
        return '\n'.join(lines)


def draw_circuit(circuit) -> str:
    """
    Render a circuit as a text diagram.

    Accepts anything with ``n_qubits``, ``n_clbits`` and ``instructions``.

    Raises
    ------
    IndexError
        If an instruction refers to a wire the circuit does not have.
    """
    drawer = CircuitDrawer(circuit.n_qubits, circuit.n_clbits)
    for inst in circuit.instructions:
        if inst.name == 'measure':
            drawer.add_measure(inst.qubits[0], inst.classical_bits[0])
        elif inst.name == 'cx':
            drawer.add_cx(*inst.qubits)
        else:
            drawer.add_single_gate(inst.name, inst.qubits[0])
    return drawer.draw()


def show_counts(counts: Dict[str, int], total: Optional[int] = None) -> str:
    """Display measurement counts as a text histogram."""
    if total is None:
        total = sum(counts.values())

    lines = []
    lines.append("Measurement Results:")
    lines.append("─" * 50)

    for bitstring in sorted(counts.keys()):
        count = counts[bitstring]
        prob = count / total
        bar = '█' * int(prob * 40)
        lines.append(f"|{bitstring}⟩: {bar:40s} {count:4d} ({prob*100:5.1f}%)")

    return '\n'.join(lines)


def plot_counts(counts: Dict[str, int], filename: Optional[str] = None,
                title: str = 'Simulation Results'):
    """
    Bar chart of outcome probabilities (count / total shots).

    Parameters
    ----------
    counts : dict
        Outcome label to count, as returned by ``run``.
    filename : str, optional
        If given, the figure is also saved there.

    Returns
    -------
    matplotlib.figure.Figure
    """
    # Figure without pyplot leaves the global backend alone
    try:
        from matplotlib.figure import Figure
    except ImportError as exc:
        raise ImportError("plot_counts requires matplotlib: pip install tiny-qed[plot]") from exc

    total = sum(counts.values())
    labels = sorted(counts)
    probs = [counts[label] / total for label in labels]

    fig = Figure(figsize=(6, 4))
    ax = fig.add_subplot()
    ax.bar(labels, probs, color='#2196F3')
    ax.set_xlabel('State')
    ax.set_ylabel('Probability')
    ax.set_title(title)
    ax.set_ylim(0, 1)
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()

    if filename:
        fig.savefig(filename, dpi=150, bbox_inches='tight')
    return fig
