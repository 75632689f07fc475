"""Simulation grid holding the velocity, force and dye fields."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

FIELD_DTYPE = np.float32


@dataclass
class Grid:
    """Square ``n`` by ``n`` grid of fields.

    Each field is indexed as ``field[j, i]``, where ``i`` runs along x
    (columns) and ``j`` runs along y (rows).
    """

    n: int
    u: np.ndarray
    v: np.ndarray
    f_x: np.ndarray
    f_y: np.ndarray
    dye: np.ndarray

    @classmethod
    def create(cls, n: int) -> "Grid":
        """Create a grid of size ``n`` with every field set to zero."""
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"grid size must be an integer, got {type(n).__name__}")
        if n <= 0:
            raise ValueError(f"grid size must be positive, got {n}")
        n = int(n)

        def zeros() -> np.ndarray:
            return np.zeros((n, n), dtype=FIELD_DTYPE)

        return cls(n=n, u=zeros(), v=zeros(), f_x=zeros(), f_y=zeros(), dye=zeros())

    def clear(self) -> None:
        """Reset every field of the grid to zero, in place."""
        for field in (self.u, self.v, self.f_x, self.f_y, self.dye):
            field.fill(0.0)