"""Vertical extrusion of a grid surface into a closed solid."""

from __future__ import annotations

import logging

import numpy as np

from wavemesh.mesh.data import TriangleMesh

logger = logging.getLogger(__name__)


def bottom_cap_faces(faces: np.ndarray, n_vertices: int) -> np.ndarray:
    """Return the surface faces reversed and shifted onto the bottom copies.

    Reversing the winding, ``(a, b, c) -> (c, b, a)``, makes the bottom cap
    face downward, away from the solid.

    Args:
        faces: Surface faces, shape (m, 3).
        n_vertices: Number of surface vertices N; bottom copies start at N.

    Returns:
        Bottom cap faces, shape (m, 3).
    """
    return np.asarray(faces)[:, ::-1] + n_vertices


def side_wall_faces(nx: int, ny: int) -> np.ndarray:
    """Return outward-facing triangles joining the grid boundary to the base.

    Vertex i on the top surface has its bottom copy at ``i + N`` with
    ``N = nx * ny``. Every boundary edge gets a quad of two triangles.
    Walls on x = 0 and x = nx-1 are emitted per row, then walls on y = 0 and
    y = ny-1 per column. The far wall of each pair is the near wall with
    reversed winding, translated across the grid.

    Args:
        nx: Number of samples along x.
        ny: Number of samples along y.

    Returns:
        Side faces, shape (4 * (nx-1) + 4 * (ny-1), 3).
    """
    n = nx * ny

    y = np.arange(ny - 1)
    x0 = np.stack(
        [
            np.column_stack([y * nx, (y + 1) * nx + n, y * nx + n]),
            np.column_stack([y * nx, (y + 1) * nx, (y + 1) * nx + n]),
        ],
        axis=1,
    )
    x1 = x0[:, :, ::-1] + (nx - 1)
    x_walls = np.concatenate([x0, x1], axis=1).reshape(-1, 3)

    x = np.arange(nx - 1)
    y0 = np.stack(
        [
            np.column_stack([x + n, x + 1, x]),
            np.column_stack([x + n, x + n + 1, x + 1]),
        ],
        axis=1,
    )
    y1 = y0[:, :, ::-1] + (n - nx)
    y_walls = np.concatenate([y0, y1], axis=1).reshape(-1, 3)

    return np.concatenate([x_walls, y_walls]).astype(np.int64)


def extrude_surface(
    surface: TriangleMesh,
    nx: int,
    ny: int,
    base: float = 0.0,
) -> TriangleMesh:
    """Extrude a grid surface down to a flat base, producing a closed solid.

    The result has 2N vertices: the surface vertices followed by copies at
    height ``base``. Faces are the top cap (surface faces as-is), the bottom
    cap (reversed, shifted by N) and the four side walls.

    Args:
        surface: Grid surface mesh with nx * ny vertices in row-major order.
        nx: Number of samples along x.
        ny: Number of samples along y.
        base: Height of the bottom cap. Default: 0.0.

    Returns:
        Volume mesh without UVs.

    Raises:
        ValueError: If the surface does not have nx * ny vertices.

    Example:
        >>> volume = extrude_surface(surface, nx=4, ny=4)
        >>> volume.n_vertices
        32
    """
    n = nx * ny
    if surface.n_vertices != n:
        raise ValueError(
            f"surface has {surface.n_vertices} vertices, expected {nx}*{ny}={n}"
        )

    bottom = surface.vertices.copy()
    bottom[:, 2] = base
    vertices = np.concatenate([surface.vertices, bottom])

    faces = np.concatenate(
        [
            surface.faces,
            bottom_cap_faces(surface.faces, n),
            side_wall_faces(nx, ny),
        ]
    )
    logger.debug(
        "Extruded %d surface faces into %d volume faces", surface.n_faces, len(faces)
    )

    return TriangleMesh(vertices, faces, name="volume")
