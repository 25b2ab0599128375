"""Tests for circuit drawing and count plotting."""

import importlib

import pytest

from tiny_qed import Circuit
from tiny_qed.circuit import Instruction
from tiny_qed.visualization import CircuitDrawer, draw_circuit, show_counts


# ---------------------------------------------------------------------------
# Text circuit diagrams
# ---------------------------------------------------------------------------

def test_draw_wires_for_qubits_and_clbits():
    text = draw_circuit(Circuit(2, 3))
    lines = text.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("q0: ")
    assert lines[1].startswith("q1: ")
    assert lines[2].startswith("c0: ")
    assert lines[4].startswith("c2: ")


def test_draw_bell_with_measurement():
    qc = Circuit(2, 1).h(0).cx(0, 1).measure(1, 0)
    assert draw_circuit(qc) == "\n".join([
        "q0: ──[H]──●───────",
        "q1: ───────⊕──[M]──",
        "c0: ═══════════╩═══",
    ])


@pytest.mark.parametrize("gate,symbol", [("x", "[X]"), ("y", "[Y]"), ("z", "[Z]"), ("h", "[H]")])
def test_single_gate_symbols(gate, symbol):
    qc = getattr(Circuit(1, 1), gate)(0)
    assert symbol in draw_circuit(qc).splitlines()[0]


def test_cx_crosses_middle_wire():
    lines = draw_circuit(Circuit(3, 1).cx(2, 0)).splitlines()
    assert "⊕" in lines[0]
    assert "┼" in lines[1]
    assert "●" in lines[2]


def test_measure_line_crosses_lower_wires():
    lines = draw_circuit(Circuit(2, 2).measure(0, 1)).splitlines()
    assert "[M]" in lines[0]
    assert "╫" in lines[1]
    assert "╬" in lines[2]
    assert "╩" in lines[3]


def test_lines_same_width():
    lines = draw_circuit(Circuit(3, 2).h(0).cx(0, 2).measure(2, 1)).splitlines()
    assert len({len(line) for line in lines}) == 1


def test_draw_out_of_range_raises():
    with pytest.raises(IndexError):
        draw_circuit(Circuit(1, 1).x(3))
    with pytest.raises(IndexError):
        draw_circuit(Circuit(1, 1).measure(0, 2))


def test_drawer_only_needs_counts_and_instructions():
    class Stub:
        n_qubits = 1
        n_clbits = 1
        instructions = Circuit(1, 1).x(0).instructions

    assert "[X]" in draw_circuit(Stub())


def test_upper_case_instructions_draw_like_lower_case():
    class Stub:
        n_qubits = 2
        n_clbits = 1
        instructions = (Instruction("CX", (0, 1)), Instruction("MEASURE", (1,), (0,)))

    assert draw_circuit(Stub()) == Circuit(2, 1).cx(0, 1).measure(1, 0).draw()


def test_drawer_class_direct():
    drawer = CircuitDrawer(2, 1)
    drawer.add_single_gate("h", 1)
    assert "[H]" in drawer.draw().splitlines()[1]


# ---------------------------------------------------------------------------
# Counts
# ---------------------------------------------------------------------------

def test_show_counts():
    text = show_counts({"11": 250, "00": 750})
    lines = text.splitlines()
    assert lines[0] == "Measurement Results:"
    assert lines[2].startswith("|00⟩")
    assert "750" in lines[2]
    assert "75.0%" in lines[2]
    assert lines[3].startswith("|11⟩")


def test_plot_counts(tmp_path):
    pytest.importorskip("matplotlib")
    from tiny_qed.visualization import plot_counts

    out = tmp_path / "counts.png"
    fig = plot_counts({"00": 30, "11": 70}, filename=str(out))
    ax = fig.axes[0]
    assert ax.get_xlabel() == "State"
    assert ax.get_ylabel() == "Probability"
    assert ax.get_title() == "Simulation Results"
    heights = [bar.get_height() for bar in ax.patches]
    assert heights == pytest.approx([0.3, 0.7])
    assert out.exists()


def test_matplotlib_backend_left_alone():
    matplotlib = pytest.importorskip("matplotlib")
    from tiny_qed import visualization

    original = matplotlib.get_backend()
    matplotlib.use("svg")
    try:
        importlib.reload(visualization)
        assert matplotlib.get_backend().lower() == "svg"
        visualization.plot_counts({"0": 1})
        assert matplotlib.get_backend().lower() == "svg"
    finally:
        matplotlib.use(original)
