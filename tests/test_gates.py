"""Tests for quantum gate definitions."""

import numpy as np
import pytest

from tiny_qed import gates as g


# ---------------------------------------------------------------------------
# Unitarity tests — every gate must satisfy U†U = I
# ---------------------------------------------------------------------------

FIXED_GATES = [("I", g.I), ("X", g.X), ("Y", g.Y), ("Z", g.Z), ("H", g.H)]


@pytest.mark.parametrize("name,matrix", FIXED_GATES)
def test_fixed_gate_unitary(name, matrix):
    """Every fixed gate must be unitary: U†U = I."""
    assert g.is_unitary(matrix), f"{name} is not unitary"


@pytest.mark.parametrize("name,matrix", FIXED_GATES)
def test_fixed_gate_self_inverse(name, matrix):
    np.testing.assert_allclose(matrix @ matrix, np.eye(2), atol=1e-12)


def test_hadamard_values():
    np.testing.assert_allclose(g.H, np.array([[1, 1], [1, -1]]) / np.sqrt(2), atol=1e-15)


def test_pauli_y_is_complex():
    assert g.Y[0, 1] == -1j
    assert g.Y[1, 0] == 1j


# ---------------------------------------------------------------------------
# Projectors
# ---------------------------------------------------------------------------

def test_projectors_sum_to_identity():
    np.testing.assert_array_equal(g.P0 + g.P1, g.I)


def test_projectors_idempotent_and_orthogonal():
    np.testing.assert_array_equal(g.P0 @ g.P0, g.P0)
    np.testing.assert_array_equal(g.P1 @ g.P1, g.P1)
    np.testing.assert_array_equal(g.P0 @ g.P1, np.zeros((2, 2)))


def test_projectors_not_unitary():
    assert not g.is_unitary(g.P0)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name,matrix", [("x", g.X), ("Y", g.Y), ("z", g.Z), ("H", g.H), ("cx", g.X)])
def test_get_matrix(name, matrix):
    assert g.get_matrix(name) is matrix


def test_get_matrix_unknown():
    with pytest.raises(KeyError):
        g.get_matrix("toffoli")


def test_measure_has_no_matrix():
    with pytest.raises(ValueError):
        g.get_matrix("measure")


def test_constants_read_only():
    with pytest.raises(ValueError):
        g.X[0, 0] = 5
