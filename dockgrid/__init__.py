"""Affinity grids, pose bookkeeping and conformation helpers for ligand docking."""

__version__ = "0.1.0"

__all__ = [
    "conformation",
    "convert_substring",
    "coords",
    "curl",
    "grid",
    "grid_dim",
    "limits",
    "matrix",
    "progress",
]