"""Simulation backends for tiny-qed."""

from tiny_qed.backends.statevector import SimulationResult, StatevectorBackend, run

__all__ = ["SimulationResult", "StatevectorBackend", "run"]
