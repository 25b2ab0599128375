"""Tests for the tiny-qed command line."""

import pytest

from tiny_qed.cli import main, parse_gates


# ---------------------------------------------------------------------------
# Gate list parsing
# ---------------------------------------------------------------------------

def test_parse_gates():
    assert parse_gates("h:0, cx:0:1,measure:1:0") == [
        ("h", (0,)), ("cx", (0, 1)), ("measure", (1, 0)),
    ]


def test_parse_gates_case_and_empty_items():
    assert parse_gates("X:1,,") == [("x", (1,))]


@pytest.mark.parametrize("text", ["swap:0:1", "h", "cx:0", "h:a", "measure:0:0:1"])
def test_parse_gates_rejects(text):
    with pytest.raises(ValueError):
        parse_gates(text)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def test_run_default_bell(capsys):
    main(["run", "--shots", "200", "--seed", "1"])
    out = capsys.readouterr().out
    assert "|00⟩" in out
    assert "|11⟩" in out
    assert "|01⟩" not in out


def test_run_custom_gates(capsys):
    main(["run", "--qubits", "3", "--clbits", "1", "--gates", "x:2", "--shots", "10"])
    out = capsys.readouterr().out
    assert "|100⟩" in out
    assert "100.0%" in out


def test_run_plot(tmp_path, capsys):
    pytest.importorskip("matplotlib")
    out_file = tmp_path / "plot.png"
    main(["run", "--shots", "20", "--plot", str(out_file)])
    assert out_file.exists()
    assert "Saved plot" in capsys.readouterr().out


def test_draw(capsys):
    main(["draw", "--qubits", "2", "--clbits", "1", "--gates", "h:0,cx:0:1"])
    out = capsys.readouterr().out
    assert "[H]" in out
    assert "●" in out


def test_info(capsys):
    main(["info"])
    out = capsys.readouterr().out
    assert "tiny-qed v" in out
    assert "cx" in out


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["run", "--gates", "toffoli:0:1:2"],
    ["run", "--qubits", "1", "--gates", "x:4"],
    ["run", "--shots", "0"],
    ["run", "--qubits", "0"],
])
def test_errors_exit_with_usage(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert "error" in capsys.readouterr().err
