"""Triangle mesh container."""

from __future__ import annotations

import numpy as np


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class TriangleMesh:
    """Immutable triangle mesh with optional per-vertex UV coordinates.

    Args:
        vertices: Vertex positions of shape (n, 3).
        faces: Vertex indices of shape (m, 3).
        uv: Optional texture coordinates of shape (n, 2).
        name: Optional name for the mesh.

    Raises:
        ValueError: If array shapes are inconsistent or faces reference
            missing vertices.
    """

    def __init__(
        self,
        vertices: np.ndarray,
        faces: np.ndarray,
        uv: np.ndarray | None = None,
        name: str | None = None,
    ):
        vertices = np.array(vertices, dtype=float)
        faces = np.array(faces, dtype=np.int64).reshape(-1, 3)

        if vertices.ndim != 2 or vertices.shape[1] != 3:
            raise ValueError("vertices must be 2D array of shape (n, 3)")
        if faces.size and (faces.min() < 0 or faces.max() >= len(vertices)):
            raise ValueError(
                f"faces reference vertices outside [0, {len(vertices)})"
            )

        if uv is not None:
            uv = np.array(uv, dtype=float)
            if uv.shape != (len(vertices), 2):
                raise ValueError(
                    f"uv must have shape ({len(vertices)}, 2), got {uv.shape}"
                )
            uv = _frozen(uv)

        self._vertices = _frozen(vertices)
        self._faces = _frozen(faces)
        self._uv = uv
        self.name = name

    @property
    def vertices(self) -> np.ndarray:
        """Vertex positions, shape (n, 3)."""
        return self._vertices

    @property
    def faces(self) -> np.ndarray:
        """Triangle vertex indices, shape (m, 3)."""
        return self._faces

    @property
    def uv(self) -> np.ndarray | None:
        """Per-vertex texture coordinates, shape (n, 2), or None."""
        return self._uv

    @property
    def has_uv(self) -> bool:
        return self._uv is not None

    @property
    def n_vertices(self) -> int:
        """Number of vertices."""
        return len(self._vertices)

    @property
    def n_faces(self) -> int:
        """Number of triangles."""
        return len(self._faces)

    @property
    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (min, max) corners of the axis-aligned bounding box."""
        return self._vertices.min(axis=0), self._vertices.max(axis=0)

    def __repr__(self) -> str:
        return (
            f"TriangleMesh(n_vertices={self.n_vertices}, "
            f"n_faces={self.n_faces}, has_uv={self.has_uv}, name={self.name!r})"
        )
