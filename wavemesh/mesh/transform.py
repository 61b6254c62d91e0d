"""Height and UV post-processing and mesh validation."""

from __future__ import annotations

import numpy as np

UV_SCALE_FLOOR = 1e-6


def shift_to_floor(heights: np.ndarray, floor: float) -> np.ndarray:
    """Shift heights so their minimum sits exactly at ``floor``.

    The offset is global: the whole height column moves by the same amount,
    so the shape of the surface is unchanged.

    Args:
        heights: Raw heights, shape (n,).
        floor: Target minimum height.

    Returns:
        Shifted heights, shape (n,).

    Raises:
        ValueError: If heights is empty or contains NaN/inf.

    Example:
        >>> shift_to_floor(np.array([-2.0, 0.5, 1.0]), 1.0)
        array([1. , 3.5, 4. ])
    """
    heights = np.asarray(heights, dtype=float)
    if heights.size == 0:
        raise ValueError("heights must not be empty")
    if np.any(~np.isfinite(heights)):
        raise ValueError("heights contain NaN or infinite values")

    # Subtracting first keeps the minimum exactly equal to floor.
    return (heights - heights.min()) + floor


def grid_uv(xp: np.ndarray, yp: np.ndarray) -> np.ndarray:
    """UV map equal to the normalized grid coordinates.

    Args:
        xp: Normalized x-coordinates, shape (n,).
        yp: Normalized y-coordinates, shape (n,).

    Returns:
        UV coordinates, shape (n, 2), already within [0, 1]^2.
    """
    return np.column_stack([np.asarray(xp, dtype=float), np.asarray(yp, dtype=float)])


def arclength_uv(vertices: np.ndarray, nx: int, ny: int) -> np.ndarray:
    """UV map from cumulative 3D distance along grid rows and columns.

    U is the running length of the polyline from the first column to each
    vertex along its row; V is the running length from the first row along
    its column. The first column has U = 0 and the first row has V = 0.

    Args:
        vertices: Grid vertices in row-major order (x fastest), shape (nx*ny, 3).
        nx: Number of samples along x.
        ny: Number of samples along y.

    Returns:
        UV coordinates, shape (nx*ny, 2).

    Raises:
        ValueError: If vertices do not match the grid dimensions.
    """
    vertices = np.asarray(vertices, dtype=float)
    if vertices.shape != (nx * ny, 3):
        raise ValueError(
            f"vertices must have shape ({nx * ny}, 3), got {vertices.shape}"
        )

    grid = vertices.reshape(ny, nx, 3)

    u = np.zeros((ny, nx))
    row_steps = np.linalg.norm(np.diff(grid, axis=1), axis=2)
    u[:, 1:] = np.cumsum(row_steps, axis=1)

    v = np.zeros((ny, nx))
    column_steps = np.linalg.norm(np.diff(grid, axis=0), axis=2)
    v[1:, :] = np.cumsum(column_steps, axis=0)

    return np.column_stack([u.ravel(), v.ravel()])


def normalize_uv(uv: np.ndarray, scale_floor: float = UV_SCALE_FLOOR) -> np.ndarray:
    """Rescale each UV axis to [0, 1].

    Each axis is shifted so its minimum is 0, then divided by its maximum.
    The divisor is floored at ``scale_floor`` so a degenerate axis (all
    values equal) maps to 0 instead of dividing by zero.

    Args:
        uv: UV coordinates, shape (n, 2).
        scale_floor: Smallest divisor used when scaling. Default: 1e-6.

    Returns:
        Normalized UV coordinates, shape (n, 2).
    """
    uv = np.asarray(uv, dtype=float)
    if uv.ndim != 2 or uv.shape[1] != 2:
        raise ValueError("uv must have shape (n, 2)")

    shifted = uv - uv.min(axis=0)
    return shifted / np.maximum(scale_floor, shifted.max(axis=0))


def check_closed(faces: np.ndarray) -> tuple[bool, str]:
    """Check that a triangle mesh is closed and consistently oriented.

    Checks that:
    - No directed edge appears more than once
    - Every directed edge (a, b) has a matching reversed edge (b, a)

    Args:
        faces: Triangle vertex indices, shape (m, 3).

    Returns:
        Tuple of (is_closed, message).
    """
    faces = np.asarray(faces, dtype=np.int64).reshape(-1, 3)
    if len(faces) == 0:
        return False, "mesh has no faces"

    edges = faces[:, [0, 1, 1, 2, 2, 0]].reshape(-1, 2)
    n = int(faces.max()) + 1
    codes = edges[:, 0] * n + edges[:, 1]

    unique, counts = np.unique(codes, return_counts=True)
    if np.any(counts > 1):
        n_repeated = int(np.sum(counts > 1))
        return False, (
            f"{n_repeated} directed edges are used by more than one face "
            f"(inconsistent winding or non-manifold)"
        )

    reversed_codes = edges[:, 1] * n + edges[:, 0]
    unmatched = ~np.isin(reversed_codes, unique)
    if np.any(unmatched):
        return False, f"{int(np.sum(unmatched))} boundary edges have no opposite face"

    return True, "Mesh is closed"
