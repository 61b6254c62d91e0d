"""Regular grid sampling and triangulation."""

from __future__ import annotations

import numpy as np


def _normalized_axis(n: int) -> np.ndarray:
    # A single sample sits at 0 rather than 0/0.
    if n == 1:
        return np.zeros(1)
    return np.arange(n) / (n - 1)


class GridSampling:
    """Regular nx-by-ny sampling of the rectangle [0, dx] x [0, dy].

    Samples are ordered row-major with x varying fastest, so sample (x, y)
    has index ``i = y * nx + x``.

    Args:
        nx: Number of samples along x.
        ny: Number of samples along y.
        dx: Extent along x.
        dy: Extent along y.
    """

    def __init__(self, nx: int, ny: int, dx: float = 1.0, dy: float = 1.0):
        if nx < 1 or ny < 1:
            raise ValueError(f"Grid needs at least one sample per axis, got ({nx}, {ny})")
        self._nx = nx
        self._ny = ny
        self._dx = dx
        self._dy = dy

    @property
    def nx(self) -> int:
        return self._nx

    @property
    def ny(self) -> int:
        return self._ny

    @property
    def n_samples(self) -> int:
        """Total number of samples (nx * ny)."""
        return self._nx * self._ny

    @property
    def shape(self) -> tuple[int, int]:
        """Shape (ny, nx) of per-sample arrays reshaped to the grid."""
        return self._ny, self._nx

    def indices(self) -> tuple[np.ndarray, np.ndarray]:
        """Return flattened integer (x, y) indices in sample order."""
        y, x = np.divmod(np.arange(self.n_samples), self._nx)
        return x, y

    def normalized_coords(self) -> tuple[np.ndarray, np.ndarray]:
        """Return flattened normalized coordinates (xp, yp) in sample order."""
        xp, yp = np.meshgrid(
            _normalized_axis(self._nx), _normalized_axis(self._ny)
        )
        return xp.ravel(), yp.ravel()

    def positions(self) -> np.ndarray:
        """Return planar positions (px, py) of shape (n_samples, 2)."""
        xp, yp = self.normalized_coords()
        return np.column_stack([xp * self._dx, yp * self._dy])

    def __repr__(self) -> str:
        return (
            f"GridSampling(nx={self._nx}, ny={self._ny}, "
            f"dx={self._dx}, dy={self._dy})"
        )


def triangulate_grid(nx: int, ny: int) -> np.ndarray:
    """Split every grid cell into two counter-clockwise triangles.

    For the cell whose lower-left sample has index i, the triangles are
    ``(i, i+1, i+nx)`` and ``(i+1, i+nx+1, i+nx)``. Cells are visited in
    row-major order and each cell's pair is emitted consecutively.

    Args:
        nx: Number of samples along x.
        ny: Number of samples along y.

    Returns:
        Face array of shape (2 * (nx-1) * (ny-1), 3).
    """
    cx, cy = max(nx - 1, 0), max(ny - 1, 0)
    y, x = np.divmod(np.arange(cx * cy), max(cx, 1))
    i = y * nx + x

    t1 = np.column_stack([i, i + 1, i + nx])
    t2 = np.column_stack([i + 1, i + nx + 1, i + nx])

    # Interleave so each cell contributes T1 then T2.
    faces = np.empty((2 * len(i), 3), dtype=np.int64)
    faces[0::2] = t1
    faces[1::2] = t2
    return faces
