"""Mesh readers for generated OBJ files."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import trimesh

from wavemesh.exceptions import MeshLoadError
from wavemesh.mesh.data import TriangleMesh


def load_mesh(path: str | Path, name: str | None = None) -> TriangleMesh:
    """Load a triangle mesh from file.

    The file is read with trimesh with processing disabled, so vertex order
    and face winding are kept as written. UVs are returned when the file
    carries per-vertex texture coordinates.

    Args:
        path: Path to mesh file (OBJ or any format trimesh reads).
        name: Optional name for the mesh. Defaults to the file stem.

    Returns:
        TriangleMesh with vertices, faces and optional UVs.

    Raises:
        MeshLoadError: If file cannot be read or does not hold a triangle mesh.
    """
    path = Path(path)

    if not path.exists():
        raise MeshLoadError(f"File not found: {path}")

    try:
        loaded = trimesh.load(str(path), force="mesh", process=False)
    except Exception as e:
        raise MeshLoadError(f"Failed to read mesh file {path}: {e}") from e

    if not isinstance(loaded, trimesh.Trimesh) or len(loaded.faces) == 0:
        raise MeshLoadError(f"No triangle mesh found in {path}")

    uv = getattr(loaded.visual, "uv", None)
    if uv is not None and len(uv) != len(loaded.vertices):
        uv = None

    try:
        return TriangleMesh(
            np.asarray(loaded.vertices),
            np.asarray(loaded.faces),
            uv=None if uv is None else np.asarray(uv),
            name=name or path.stem,
        )
    except ValueError as e:
        raise MeshLoadError(f"Malformed mesh in {path}: {e}") from e
